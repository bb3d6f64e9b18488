"""Building blocks of a small shell: C-style string helpers, printf, line reading, an environment store and builtins."""

__version__ = "0.1.0"
__all__ = ["cstrings", "printf", "lines", "environment", "builtins"]