"""
Export component - format registry and dispatch.

Every codec is a pure function of the resolved config; the registry
fixes the format ids, their conventional filenames and media types.
"""

from __future__ import annotations

from designkit.core.entities import DesignConfig

from .codecs import (
    export_claude_md,
    export_css,
    export_flutter,
    export_json,
    export_kotlin,
    export_react_native,
    export_swift,
    export_tailwind,
)
from .models import Codec, ExportFormat, ExportInput, ExportOutput, UnknownFormatError

EXPORT_FORMATS: tuple[ExportFormat, ...] = (
    ExportFormat("json", "design-tokens.json", "application/json", export_json),
    ExportFormat("css", "design-tokens.css", "text/css", export_css),
    ExportFormat("tailwind", "tailwind.config.ts", "text/plain", export_tailwind),
    ExportFormat("swift", "Theme.swift", "text/plain", export_swift),
    ExportFormat("kotlin", "Theme.kt", "text/plain", export_kotlin),
    ExportFormat("flutter", "theme.dart", "text/plain", export_flutter),
    ExportFormat("react-native", "theme.ts", "text/plain", export_react_native),
    ExportFormat("claude-md", "CLAUDE.md", "text/markdown", export_claude_md),
)

EXPORTERS: dict[str, Codec] = {fmt.id: fmt.codec for fmt in EXPORT_FORMATS}

_FORMATS_BY_ID = {fmt.id: fmt for fmt in EXPORT_FORMATS}


def valid_formats() -> list[str]:
    return list(EXPORTERS)


def get_format(format_id: str) -> ExportFormat:
    fmt = _FORMATS_BY_ID.get(format_id)
    if fmt is None:
        raise UnknownFormatError(format_id, valid_formats())
    return fmt


def get_exporter(format_id: str) -> Codec:
    """Codec for a format id; raises UnknownFormatError listing the valid ids."""
    return get_format(format_id).codec


def run_export(inp: ExportInput) -> ExportOutput:
    fmt = get_format(inp.format)
    return ExportOutput(format=fmt.id, filename=fmt.filename, content=fmt.codec(inp.config))


def generate_all_exports(config: DesignConfig) -> dict[str, str]:
    """Every format keyed by its conventional filename."""
    return {fmt.filename: fmt.codec(config) for fmt in EXPORT_FORMATS}


def run(inp: ExportInput) -> ExportOutput:
    """Main entry point for the export component."""
    return run_export(inp)
