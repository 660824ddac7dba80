"""Align the closing bracket of multi-line list and dict literals with their opening line."""

__version__ = "0.1.0"
