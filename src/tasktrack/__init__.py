"""tasktrack: a small menu-driven task tracker backed by SQLite."""

__version__ = "0.1.0"
