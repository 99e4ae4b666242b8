"""GitHub review queue and to-do list aggregation."""

__version__ = "0.1.0"
