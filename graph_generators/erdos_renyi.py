import numpy as np


def _weights(rng: np.random.Generator, size: int, max_weight: int) -> np.ndarray:
    if max_weight < 1:
        raise ValueError("max_weight must be >= 1")
    if max_weight == 1:
        return np.ones(size, dtype=int)
    return rng.integers(1, max_weight + 1, size=size)


def generate_er(n: int, p: float, max_weight: int = 1, seed=None) -> np.ndarray:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph.

    Args:
        n (int): Number of nodes.
        p (float): Probability of each edge.
        max_weight (int): Edge weights are drawn uniformly from 1..max_weight.
        seed: Seed or np.random.Generator.

    Returns:
        np.ndarray: An (n, n) symmetric integer adjacency matrix.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must be in [0, 1]")
    rng = np.random.default_rng(seed)
    matrix = np.zeros((n, n), dtype=int)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    edges = rng.random(rows.size) < p
    weights = _weights(rng, int(edges.sum()), max_weight)
    matrix[rows[edges], cols[edges]] = weights

    # mirror the matrix to make it symmetric (undirected)
    matrix[cols[edges], rows[edges]] = weights

    return matrix
