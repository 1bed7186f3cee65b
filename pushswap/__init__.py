"""Two-stack push/swap operations, a greedy insertion solver, and small character, memory, string, list and formatting helpers."""

__version__ = "0.1.0"