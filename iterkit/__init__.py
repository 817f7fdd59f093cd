"""Iterator adaptors and helpers: lookahead, merge-joins, zipping, min/max,
permutations, power sets, sources, tuples and size-hint arithmetic."""

__version__ = "0.1.0"

__all__ = [
    "adaptors",
    "combinatorics",
    "peeking",
    "sizehint",
    "sources",
    "tuples",
    "zipping",
]