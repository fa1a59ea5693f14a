# tests/unit/graph/test_unit_community_ranker.py — v1
"""Tests for graph/community_ranker.py — contribution ordering."""

from __future__ import annotations

import pytest

from communitysat.core.literals import formula_from_strings
from communitysat.graph.builder import build_literal_graph
from communitysat.graph.community_ranker import rank_communities
from communitysat.graph.partition import Partition


@pytest.fixture
def two_triangles():
    formula = formula_from_strings(
        ["a", "b", "c", "d", "e", "f"],
        [["a", "b", "c"], ["d", "e", "f"]],
    )
    return build_literal_graph(formula)


class TestRankCommunities:
    def test_ascending_default(self, scenario_graph):
        ranked = rank_communities(scenario_graph, Partition.singletons(scenario_graph.nodes))
        assert [c.label for c in ranked] == [1, 3, 5, 2, 4, 6]
        assert [c.rank for c in ranked] == [0, 1, 2, 3, 4, 5]
        assert ranked[0].contribution == pytest.approx(-16 / 324)
        assert ranked[-1].contribution == pytest.approx(-4 / 324)

    def test_descending(self, scenario_graph):
        ranked = rank_communities(
            scenario_graph, Partition.singletons(scenario_graph.nodes), order="descending",
        )
        assert [c.label for c in ranked] == [2, 4, 6, 1, 3, 5]

    @pytest.mark.parametrize(
        ("order", "expected"),
        [("ascending", [2, 1, 0]), ("descending", [1, 0, 2])],
    )
    def test_ties_keep_enumeration_order(self, two_triangles, order, expected):
        # Both triangles contribute exactly 0.25, the isolated literals 0.0.
        # Enumeration order over sorted nodes is label 1, 2, then 0.
        p = Partition.from_communities([[7, 9, 11], [1, 3, 5], [2, 4, 6, 8, 10, 12]])
        ranked = rank_communities(two_triangles, p, order=order)
        assert [c.label for c in ranked] == expected

    def test_members_sorted(self, scenario_graph):
        p = Partition.from_communities([[5, 4, 1], [6, 3, 2]])
        ranked = rank_communities(scenario_graph, p)
        assert sorted(c.members for c in ranked) == [[1, 4, 5], [2, 3, 6]]

    def test_contributions_sum_to_modularity(self, scenario_graph):
        p = Partition.from_communities([[1, 4, 5], [2, 3, 6]])
        ranked = rank_communities(scenario_graph, p)
        assert sum(c.contribution for c in ranked) == pytest.approx(88 / 324)

    def test_unknown_order(self, scenario_graph):
        with pytest.raises(ValueError, match="community order"):
            rank_communities(scenario_graph, Partition.singletons([1]), order="random")  # type: ignore[arg-type]
