"""Deterministic global minimum cut (Stoer-Wagner) on dense weight matrices."""
from .exceptions import InvalidGraphError, GraphFormatError
from .stoer_wagner import MinCutEngine, stoer_wagner_wrapper, cut_value
from .brute_force import brute_force_min_cut
from .graph_io import parse_connections, read_graph, split_product, solve

__all__ = [
    "InvalidGraphError",
    "GraphFormatError",
    "MinCutEngine",
    "stoer_wagner_wrapper",
    "cut_value",
    "brute_force_min_cut",
    "parse_connections",
    "read_graph",
    "split_product",
    "solve",
]
