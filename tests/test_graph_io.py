"""Tests for the connection list reader and puzzle answer (mincut.graph_io)."""

import numpy as np
import pytest

from mincut.exceptions import GraphFormatError
from mincut.graph_io import parse_connections, read_graph, solve, split_product
from mincut.stoer_wagner import MinCutEngine, cut_value


class TestParseConnections:

    def test_labels_sorted_and_deduplicated(self):
        labels, matrix = parse_connections(["b: c a", "a: d"])
        assert labels == ["a", "b", "c", "d"]
        assert matrix.shape == (4, 4)

    def test_edges_are_symmetric(self):
        labels, matrix = parse_connections(["b: c a"])
        i, j, k = labels.index("a"), labels.index("b"), labels.index("c")
        assert matrix[i, j] == matrix[j, i] == 1
        assert matrix[j, k] == matrix[k, j] == 1
        assert matrix[i, k] == 0
        assert np.all(np.diag(matrix) == 0)

    def test_parallel_edges_accumulate(self):
        labels, matrix = parse_connections(["a: b b", "b: a"])
        assert labels == ["a", "b"]
        assert matrix[0, 1] == matrix[1, 0] == 3

    def test_blank_lines_and_bare_labels(self):
        labels, matrix = parse_connections(["", "a: b", "   ", "z:"])
        assert labels == ["a", "b", "z"]
        assert matrix[2].sum() == 0

    def test_integer_dtype(self, puzzle_lines):
        _, matrix = parse_connections(puzzle_lines)
        assert matrix.dtype == np.int64

    def test_puzzle_example_shape(self, puzzle_lines):
        labels, matrix = parse_connections(puzzle_lines)
        assert len(labels) == 15
        assert matrix.sum() // 2 == 33

    @pytest.mark.parametrize("lines, line_no", [
        (["a: b", "c d"], 2),
        ([": b"], 1),
        (["a: b", "", "c: c"], 3),
    ], ids=["missing_colon", "empty_label", "self_connection"])
    def test_format_errors(self, lines, line_no):
        with pytest.raises(GraphFormatError) as excinfo:
            parse_connections(lines)
        assert excinfo.value.line_no == line_no
        assert f"line {line_no}" in str(excinfo.value)


class TestPuzzle:

    def test_read_graph(self, puzzle_file, puzzle_lines):
        labels, matrix = read_graph(str(puzzle_file))
        expected_labels, expected_matrix = parse_connections(puzzle_lines)
        assert labels == expected_labels
        np.testing.assert_array_equal(matrix, expected_matrix)

    def test_minimum_cut_is_three_wires(self, puzzle_lines):
        labels, matrix = parse_connections(puzzle_lines)
        cut, side = MinCutEngine(matrix, labels=labels).compute_min_cut()
        assert cut == 3
        assert sorted([len(side), len(labels) - len(side)]) == [6, 9]
        indices = [labels.index(label) for label in side]
        assert cut_value(matrix, indices) == 3

    def test_groups(self, puzzle_lines):
        labels, matrix = parse_connections(puzzle_lines)
        _, side = MinCutEngine(matrix, labels=labels).compute_min_cut()
        small = {"bvb", "hfx", "jqt", "ntq", "rhn", "xhk"}
        assert side in (small, set(labels) - small)

    @pytest.mark.parametrize("expected_cut", [None, 3])
    def test_solve(self, puzzle_file, expected_cut):
        assert solve(str(puzzle_file), expected_cut=expected_cut) == (3, 54)

    def test_split_product(self):
        assert split_product(9, 15) == 54
        assert split_product(1, 2) == 1
