"""Record exchange bid/ask quotes in a SQLite database."""

__version__ = "0.1.0"
__all__ = ["database"]