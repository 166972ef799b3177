"""Word index and interactive search over the files of a directory tree."""

__version__ = "0.1.0"
__all__ = ["engine", "index", "text", "tree"]