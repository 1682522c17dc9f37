import numpy as np

from graph_generators.erdos_renyi import _weights


def generate_ba(n: int, m: int, max_weight: int = 1, seed=None) -> np.ndarray:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 The first m nodes start as a clique.
        max_weight (int): Edge weights are drawn uniformly from 1..max_weight.
        seed: Seed or np.random.Generator.

    Returns:
        np.ndarray: An (n, n) symmetric integer adjacency matrix.
    """
    if m < 1:
        raise ValueError("m must be >= 1")
    if n < m:
        raise ValueError("n must be >= m")

    rng = np.random.default_rng(seed)
    adjacency = np.zeros((n, n), dtype=bool)

    rows, cols = np.triu_indices(m, k=1)
    adjacency[rows, cols] = True
    adjacency[cols, rows] = True

    degrees = adjacency.sum(axis=1)

    for i in range(m, n):
        current_degrees = degrees[:i]
        total_degree = current_degrees.sum()

        if total_degree == 0:
            # single seed node has no degree yet, attach uniformly
            targets = rng.choice(i, size=m, replace=False)
        else:
            probabilities = current_degrees / total_degree
            # zero-degree nodes cannot be drawn, fall back when too few remain
            if np.count_nonzero(probabilities) < m:
                targets = rng.choice(i, size=m, replace=False)
            else:
                targets = rng.choice(i, size=m, replace=False, p=probabilities)

        adjacency[i, targets] = True
        adjacency[targets, i] = True

        degrees[i] = m
        degrees[targets] += 1

    rows, cols = np.nonzero(np.triu(adjacency, k=1))
    weights = _weights(rng, rows.size, max_weight)
    matrix = np.zeros((n, n), dtype=int)
    matrix[rows, cols] = weights
    matrix[cols, rows] = weights
    return matrix
