"""Meeting timezone-equity engine."""

__version__ = "0.1.0"
