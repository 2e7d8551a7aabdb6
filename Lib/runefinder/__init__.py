"""Find Unicode characters by name."""

__version__ = "0.1.0"
