"""Word counting for plain text files, with a podium of the most frequent words."""

__version__ = "0.1.0"
__all__ = ["__version__"]