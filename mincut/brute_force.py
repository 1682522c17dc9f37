import numpy as np
from itertools import product

from mincut.stoer_wagner import _validate_matrix

MAX_BRUTE_FORCE_N = 20


def brute_force_min_cut(graph_matrix: np.ndarray) -> tuple[int, list]:
    """
    Exhaustive minimum cut over every bipartition of the vertices.

    Vertex n-1 is pinned to the far side so each of the 2^(n-1) - 1
    non-trivial partitions is visited once. Only meant as ground truth for
    small graphs.

    Returns:
        (cut_weight, side): the smallest crossing weight and the sorted
        vertex indices of the side that does not contain vertex n-1.
    """
    matrix = _validate_matrix(graph_matrix)
    n = matrix.shape[0]
    if n > MAX_BRUTE_FORCE_N:
        raise ValueError(
            f"brute force is limited to n <= {MAX_BRUTE_FORCE_N}, got {n}")

    best_cut = None
    best_side = None

    for bits in product((False, True), repeat=n - 1):
        if not any(bits):
            continue
        mask = np.zeros(n, dtype=bool)
        mask[:n - 1] = bits
        cut = int(np.sum(matrix[mask][:, ~mask]))
        if best_cut is None or cut < best_cut:
            best_cut = cut
            best_side = np.flatnonzero(mask).tolist()

    return best_cut, best_side
