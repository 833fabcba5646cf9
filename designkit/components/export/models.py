"""
Export component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from designkit.core.entities import DesignConfig

Codec = Callable[[DesignConfig], str]


class UnknownFormatError(ValueError):
    """Raised when an export format id is not registered."""

    def __init__(self, format_id: str, valid_formats: Iterable[str]) -> None:
        self.format_id = format_id
        self.valid_formats = list(valid_formats)
        super().__init__(
            f"Unknown format '{format_id}'. Valid formats: {', '.join(self.valid_formats)}"
        )


@dataclass(frozen=True)
class ExportFormat:
    """A registered output format."""

    id: str
    filename: str
    media_type: str
    codec: Codec


@dataclass(frozen=True)
class ExportInput:
    """Input for exporting a config in one format."""

    config: DesignConfig
    format: str


@dataclass(frozen=True)
class ExportOutput:
    """Output from exporting a config."""

    format: str
    filename: str
    content: str
