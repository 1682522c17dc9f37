import numpy as np


def _connected_block(rng: np.random.Generator, size: int, p_in: float) -> np.ndarray:
    block = np.zeros((size, size), dtype=int)
    rows, cols = np.triu_indices(size, k=1)
    edges = rng.random(rows.size) < p_in
    block[rows[edges], cols[edges]] = 1
    # spanning path keeps the block connected whatever p_in is
    path = np.arange(size - 1)
    block[path, path + 1] = 1
    return np.maximum(block, block.T)


def generate_planted_cut(n: int, cut_edges: int = 3, p_in: float = 0.5,
                         shuffle: bool = True, seed=None) -> np.ndarray:
    """
    Two dense clusters joined by exactly `cut_edges` unit edges.

    Cluster sizes are n // 2 and n - n // 2. When every cut inside a
    cluster is heavier than `cut_edges` (e.g. p_in=1 and n // 2 - 1 > cut_edges)
    the planted split is the unique global minimum cut.

    Args:
        n (int): Total number of nodes, at least 4.
        cut_edges (int): Number of edges between the two clusters.
        p_in (float): Edge probability inside each cluster.
        shuffle (bool): Randomly relabel the nodes. When False the first
                        n // 2 nodes form one cluster.
        seed: Seed or np.random.Generator.

    Returns:
        np.ndarray: An (n, n) symmetric integer adjacency matrix.
    """
    if n < 4:
        raise ValueError("n must be >= 4")
    if cut_edges < 1:
        raise ValueError("cut_edges must be >= 1")

    half = n // 2
    other = n - half
    if cut_edges > half * other:
        raise ValueError(
            f"at most {half * other} cut edges fit between clusters of {half} and {other}")

    rng = np.random.default_rng(seed)
    matrix = np.zeros((n, n), dtype=int)
    matrix[:half, :half] = _connected_block(rng, half, p_in)
    matrix[half:, half:] = _connected_block(rng, other, p_in)

    pairs = rng.choice(half * other, size=cut_edges, replace=False)
    a, b = np.divmod(pairs, other)
    matrix[a, half + b] = 1
    matrix[half + b, a] = 1

    if shuffle:
        perm = rng.permutation(n)
        matrix = matrix[np.ix_(perm, perm)]

    return matrix
