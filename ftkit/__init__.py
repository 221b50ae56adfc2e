"""Character, memory, string, list, line-reading and printf-style helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "transform", "lists", "lines", "printf"]