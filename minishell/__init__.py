"""Shell builtins, an ordered variable environment and string and character helpers."""

__version__ = "0.1.0"
__all__ = ["libchar", "libstr", "environment", "builtins"]