"""Classic programming drills: text patterns, array algorithms and section titles."""

__version__ = "0.1.0"
__all__ = ["patterns", "sums", "merging", "sections"]