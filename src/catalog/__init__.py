"""Library catalog & lending store."""

__version__ = "0.1.0"
