import numpy as np
import pytest


PUZZLE_EXAMPLE = """\
jqt: rhn xhk nvd
rsh: frs pzl lsr
xhk: hfx
cmg: qnr nvd lhk bvb
rhn: xhk bvb hfx
bvb: xhk hfx
pzl: lsr hfx nvd
qnr: nvd
ntq: jqt hfx bvb xhk
nvd: lhk
lsr: lhk
rzs: qnr cmg lsr rsh
frs: qnr lhk lsr
"""


def matrix_from_edges(labels, edges):
    """Symmetric int matrix from (label, label, weight) triples."""
    index = {label: i for i, label in enumerate(labels)}
    matrix = np.zeros((len(labels), len(labels)), dtype=int)
    for u, v, w in edges:
        matrix[index[u], index[v]] += w
        matrix[index[v], index[u]] += w
    return matrix


@pytest.fixture
def puzzle_lines():
    return PUZZLE_EXAMPLE.splitlines()


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "connections.txt"
    path.write_text(PUZZLE_EXAMPLE)
    return path


@pytest.fixture
def triangle():
    labels = ["A", "B", "C"]
    return labels, matrix_from_edges(labels, [("A", "B", 1), ("B", "C", 1), ("A", "C", 1)])


@pytest.fixture
def two_triangles():
    labels = ["A", "B", "C", "D", "E", "F"]
    edges = [
        ("A", "B", 1), ("B", "C", 1), ("A", "C", 1),
        ("D", "E", 1), ("E", "F", 1), ("D", "F", 1),
        ("C", "D", 1),
    ]
    return labels, matrix_from_edges(labels, edges)


@pytest.fixture
def leaf_graph():
    """X hangs off a dense K4 on Y, P, Q, R."""
    labels = ["P", "Q", "R", "X", "Y"]
    edges = [("X", "Y", 3)]
    core = ["Y", "P", "Q", "R"]
    for i, u in enumerate(core):
        for v in core[i + 1:]:
            edges.append((u, v, 2))
    return labels, matrix_from_edges(labels, edges)


@pytest.fixture
def disconnected():
    labels = ["a", "b", "c", "d", "e"]
    edges = [("a", "b", 4), ("b", "c", 2), ("a", "c", 1), ("d", "e", 7)]
    return labels, matrix_from_edges(labels, edges)
