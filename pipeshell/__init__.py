"""Shell building blocks: string helpers, line reading, formatting and pipelines."""

__version__ = "0.1.0"
__all__ = ["chars", "linereader", "strutil", "fmt", "pipeline"]