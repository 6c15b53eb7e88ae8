"""Small utilities: a chained hash map, string hashing, string splitting and nanosecond time points."""

__version__ = "0.1.0"
__all__ = ["hash_map", "hashing", "strings", "timepoint"]