"""SVG path-data parser service."""

__version__ = "0.1.0"
