"""Invoice generation from time-tracking CSV exports."""

__version__ = "0.1.0"
