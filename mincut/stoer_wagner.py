import numpy as np
from typing import Hashable, Optional, Sequence

from mincut.exceptions import InvalidGraphError

INT64_MAX = int(np.iinfo(np.int64).max)


def _validate_matrix(graph_matrix) -> np.ndarray:
    """
    Checks that graph_matrix describes an undirected, non-negative integer
    weighted graph with at least two vertices and returns it as int64.
    """
    if graph_matrix is None:
        raise InvalidGraphError("graph_matrix is None")

    try:
        matrix = np.asarray(graph_matrix)
    except ValueError as exc:
        # ragged nested sequences
        raise InvalidGraphError(f"graph_matrix is not a matrix: {exc}") from exc
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InvalidGraphError(
            f"graph_matrix must be square, got shape {matrix.shape}")
    if matrix.shape[0] < 2:
        raise InvalidGraphError(
            f"a cut needs at least 2 vertices, got {matrix.shape[0]}")

    if matrix.dtype == bool:
        matrix = matrix.astype(np.int64)
    elif not np.issubdtype(matrix.dtype, np.integer):
        if not np.issubdtype(matrix.dtype, np.floating):
            raise InvalidGraphError(
                f"graph_matrix must hold integer weights, got dtype {matrix.dtype}")
        # nx.to_numpy_array hands back floats; accept them when integral
        if not np.all(np.isfinite(matrix)) or not np.array_equal(matrix, np.round(matrix)):
            raise InvalidGraphError("graph_matrix must hold integer weights")

    if np.any(matrix < 0):
        raise InvalidGraphError("graph_matrix must not contain negative weights")
    if int(matrix.max()) > INT64_MAX:
        raise InvalidGraphError(
            f"weight {int(matrix.max())} exceeds the int64 maximum {INT64_MAX}")

    # merged rows and phase weights never exceed the sum of all entries
    total = int(matrix.sum(dtype=object))
    if total > INT64_MAX:
        raise InvalidGraphError(
            f"total weight {total} exceeds the int64 maximum {INT64_MAX}")

    matrix = matrix.astype(np.int64)

    if not np.array_equal(matrix, matrix.T):
        raise InvalidGraphError("graph_matrix must be symmetric (undirected)")
    if np.any(np.diag(matrix) != 0):
        raise InvalidGraphError("graph_matrix must have a zero diagonal")

    return matrix


def cut_value(graph_matrix: np.ndarray, side) -> int:
    """
    Weight of the edges with exactly one endpoint in `side`.

    Args:
        graph_matrix (np.ndarray): (n, n) symmetric adjacency matrix.
        side: boolean mask of length n, or a collection of vertex indices.

    Returns:
        int: total crossing weight.
    """
    matrix = np.asarray(graph_matrix)
    n = matrix.shape[0]

    side = np.asarray(list(side) if isinstance(side, (set, frozenset)) else side)
    if side.dtype == bool:
        mask = side
    else:
        mask = np.zeros(n, dtype=bool)
        mask[side.astype(int)] = True

    return int(np.sum(matrix[mask][:, ~mask]))


class MinCutEngine:
    """
    Deterministic global minimum cut (Stoer-Wagner) on a dense weight matrix.

    Each phase runs a maximum adjacency search from vertex 0, records the
    cut-of-the-phase that isolates the last vertex t, and merges t into the
    vertex s picked just before it. After n - 1 phases the smallest recorded
    cut is a global minimum cut.

    The validated input is kept untouched on the engine; working state is
    rebuilt on every call to compute_min_cut.
    """

    def __init__(self, graph_matrix, labels: Optional[Sequence[Hashable]] = None):
        """
        Args:
            graph_matrix: (n, n) symmetric, non-negative integer matrix with
                          a zero diagonal. Parallel edges are summed weights.
            labels (Optional[Sequence]): one unique label per vertex, used to
                          report the cut side. Defaults to 0..n-1.

        Raises:
            InvalidGraphError: if the matrix or the labels are not usable.
        """
        self.graph_matrix = _validate_matrix(graph_matrix)
        self.graph_matrix.setflags(write=False)
        self.n = self.graph_matrix.shape[0]

        if labels is None:
            labels = list(range(self.n))
        else:
            labels = list(labels)
            if len(labels) != self.n:
                raise InvalidGraphError(
                    f"expected {self.n} labels, got {len(labels)}")
            if len(set(labels)) != self.n:
                raise InvalidGraphError("labels must be unique")
        self.labels = labels

        self._reset()

    def _reset(self):
        self._mat = self.graph_matrix.copy()
        self._groups = [[i] for i in range(self.n)]
        self._alive = np.ones(self.n, dtype=bool)

    def _minimum_cut_phase(self, phase: int) -> tuple[int, int, int]:
        """
        One maximum adjacency search over the live super-vertices.

        Returns:
            (s, t, cut_of_the_phase) where t is the last vertex added and s
            the one added right before it.
        """
        mat = self._mat
        w = mat[0].copy()  # w[i] = weight between A and i
        in_a = ~self._alive
        s = t = 0

        for _ in range(self.n - phase):
            in_a[t] = True
            s = t
            # argmax keeps the first maximum, so the lowest index wins ties
            t = int(np.argmax(np.where(in_a, np.iinfo(np.int64).min, w)))
            w += mat[t]

        # the final update folded t's own self-loop into w[t]
        return s, t, int(w[t] - mat[t, t])

    def _merge(self, s: int, t: int):
        self._groups[s].extend(self._groups[t])
        self._groups[t] = []

        self._mat[s, :] += self._mat[t, :]
        self._mat[:, s] = self._mat[s, :]
        self._alive[t] = False

    def compute_min_cut(self, expected_cut: Optional[int] = None) -> tuple[int, set]:
        """
        Runs the n - 1 minimum cut phases.

        Args:
            expected_cut (Optional[int]): opt-in shortcut. When given, the
                search stops as soon as the best cut found so far has exactly
                this weight. Only pass it when the minimum is known in advance
                (e.g. from problem constraints); the remaining phases are not
                run, so a wrong hint can return a cut that is not minimal.

        Returns:
            (cut_weight, side_a): the minimum cut weight and the labels on one
            side of it. The other side is every remaining label.
        """
        self._reset()

        best_weight = None
        best_group = None

        for phase in range(1, self.n):
            s, t, cut = self._minimum_cut_phase(phase)

            if best_weight is None or cut < best_weight:
                best_weight = cut
                best_group = list(self._groups[t])

            self._merge(s, t)

            if expected_cut is not None and best_weight == expected_cut:
                break

        return best_weight, {self.labels[i] for i in best_group}


def stoer_wagner_wrapper(graph_matrix: np.ndarray, expected_cut: Optional[int] = None) -> int:
    """
    Public wrapper. graph_matrix is an (n x n) symmetric adjacency matrix.
    Returns only the minimum cut value.
    """
    cut_weight, _ = MinCutEngine(graph_matrix).compute_min_cut(expected_cut=expected_cut)
    return cut_weight
