"""Tests for single-pass graph statistics."""

from __future__ import annotations

import pytest

from offline_graph.errors import MalformedGraphError
from offline_graph.stats import format_stats, graph_stats


class TestGraphStats:
    def test_basic_counts(self, make_graph) -> None:
        graph = make_graph([[1, 2], [1], [], [0, 1, 2]])
        stats = graph_stats(graph)
        assert stats.nodes == 4
        assert stats.arcs == 6
        assert stats.loops == 1
        assert stats.dangling == 1
        assert stats.terminal == 2
        assert stats.min_outdegree == 0
        assert stats.min_outdegree_node == 2
        assert stats.max_outdegree == 3
        assert stats.max_outdegree_node == 3
        assert stats.avg_outdegree == 1.5
        assert stats.perc_dangling == 25.0
        assert stats.outdegree_counts.tolist() == [1, 1, 1, 1]

    def test_empty_graph(self, make_graph) -> None:
        stats = graph_stats(make_graph([]))
        assert stats.nodes == 0
        assert stats.arcs == 0
        assert stats.avg_outdegree == 0.0
        assert stats.perc_dangling == 0.0

    def test_validation_passed_through(self, make_graph) -> None:
        graph = make_graph([[1, 0], []])
        with pytest.raises(MalformedGraphError):
            graph_stats(graph, validate=True)


class TestFormatStats:
    def test_key_value_lines(self, make_graph) -> None:
        text = format_stats(graph_stats(make_graph([[1], [0]])))
        lines = dict(line.split("=", 1) for line in text.splitlines())
        assert lines["nodes"] == "2"
        assert lines["arcs"] == "2"
        assert lines["dangling"] == "0"
        assert lines["avgoutdegree"] == "1.0"
