"""Git Time Metric: per-file time tracking kept in git notes."""

__version__ = "0.1.0"
