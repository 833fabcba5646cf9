"""DesignKit: design-token resolution and multi-format export."""

__version__ = "0.1.0"
