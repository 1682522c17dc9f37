import networkx as nx
import numpy as np
from typing import Iterable, Optional

from mincut.exceptions import GraphFormatError
from mincut.stoer_wagner import MinCutEngine


def parse_connections(lines: Iterable[str]) -> tuple[list, np.ndarray]:
    """
    Parses an adjacency list where every line reads

        <label>: <neighbour> <neighbour> ...

    Labels are deduplicated and sorted to fix the vertex indices. Each listed
    connection adds 1 to the edge weight, so a pair mentioned twice becomes a
    weight-2 edge.

    Returns:
        (labels, matrix): sorted labels and the (n, n) int64 adjacency matrix.
    """
    G = nx.MultiGraph()

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        head, sep, tail = line.partition(":")
        if not sep:
            raise GraphFormatError(f"missing ':' in {line!r}", line_no)
        label = head.strip()
        if not label:
            raise GraphFormatError(f"empty label in {line!r}", line_no)

        G.add_node(label)
        for neighbour in tail.split():
            if neighbour == label:
                raise GraphFormatError(f"{label!r} is connected to itself", line_no)
            G.add_edge(label, neighbour)

    labels = sorted(G.nodes())
    # weight=None counts every parallel edge as 1 and sums them
    matrix = nx.to_numpy_array(G, nodelist=labels, dtype=np.int64, weight=None)
    return labels, matrix


def read_graph(path: str) -> tuple[list, np.ndarray]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_connections(f)


def split_product(side_size: int, n: int) -> int:
    """Product of the sizes of the two sides of a cut."""
    return side_size * (n - side_size)


def solve(path: str, expected_cut: Optional[int] = None) -> tuple[int, int]:
    """
    Reads a connection list, splits it along a global minimum cut and
    returns (cut_weight, product of the two group sizes).
    """
    labels, matrix = read_graph(path)
    engine = MinCutEngine(matrix, labels=labels)
    cut_weight, side_a = engine.compute_min_cut(expected_cut=expected_cut)
    return cut_weight, split_product(len(side_a), len(labels))
