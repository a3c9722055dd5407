"""Solvers for classic algorithmic problems, grouped by technique into submodules."""

__version__ = "0.1.0"
__all__ = [
    "arith",
    "arrays",
    "bits",
    "combinatorics",
    "dp",
    "geometry",
    "graphs",
    "greedy",
    "josephus",
    "search",
    "segtree",
    "strings",
]