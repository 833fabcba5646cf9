"""
Export component - multi-format codecs for the resolved config.
"""

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
from .component import (
    EXPORT_FORMATS,
    EXPORTERS,
    generate_all_exports,
    get_exporter,
    get_format,
    run,
    run_export,
    valid_formats,
)
from .models import Codec, ExportFormat, ExportInput, ExportOutput, UnknownFormatError

__all__ = [
    # Entry points
    "run",
    "run_export",
    "generate_all_exports",
    "get_exporter",
    "get_format",
    "valid_formats",
    # Registry
    "EXPORT_FORMATS",
    "EXPORTERS",
    # Codecs
    "export_json",
    "export_css",
    "export_tailwind",
    "export_swift",
    "export_kotlin",
    "export_flutter",
    "export_react_native",
    "export_claude_md",
    # Models
    "Codec",
    "ExportFormat",
    "ExportInput",
    "ExportOutput",
    "UnknownFormatError",
]
