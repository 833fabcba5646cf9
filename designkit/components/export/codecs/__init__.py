"""
One pure function per output format: ``(DesignConfig) -> str``.
"""

from .claude_md import export_claude_md
from .css import export_css
from .flutter import export_flutter
from .json_codec import export_json
from .kotlin import export_kotlin
from .react_native import export_react_native
from .swift import export_swift
from .tailwind import export_tailwind

__all__ = [
    "export_json",
    "export_css",
    "export_tailwind",
    "export_swift",
    "export_kotlin",
    "export_flutter",
    "export_react_native",
    "export_claude_md",
]
