# tests/unit/graph/test_unit_community_detector.py — v1
"""Tests for graph/community_detector.py — modularity local-moving detection."""

from __future__ import annotations

import pytest

from communitysat.core.literals import formula_from_strings
from communitysat.graph.builder import build_literal_graph
from communitysat.graph.community_detector import (
    _best_move,
    _MoveEvaluator,
    detect_communities,
)
from communitysat.graph.modularity import compute_modularity


@pytest.fixture
def two_triangles():
    """Positive literals of (a, b, c) and (d, e, f) form two disjoint triangles."""
    formula = formula_from_strings(
        ["a", "b", "c", "d", "e", "f"],
        [["a", "b", "c"], ["d", "e", "f"]],
    )
    return build_literal_graph(formula)


class TestDetectCommunities:
    def test_finds_disjoint_triangles(self, two_triangles):
        result = detect_communities(two_triangles, seed=1, check_bounds=True)
        p = result.partition
        assert p.label_of(1) == p.label_of(3) == p.label_of(5)
        assert p.label_of(7) == p.label_of(9) == p.label_of(11)
        assert p.label_of(1) != p.label_of(7)
        assert result.modularity == pytest.approx(0.5)
        assert result.converged

    def test_isolated_nodes_stay_singletons(self, two_triangles):
        result = detect_communities(two_triangles, seed=1)
        for node in (2, 4, 6, 8, 10, 12):
            assert result.partition.label_of(node) == node
        assert result.partition.number_of_communities == 8

    def test_initial_state_is_singletons(self, scenario_graph):
        result = detect_communities(scenario_graph, seed=0)
        assert result.initial_modularity == pytest.approx(-60 / 324)

    def test_converges_on_scenario(self, scenario_graph):
        result = detect_communities(scenario_graph, seed=42, check_bounds=True)
        assert result.converged
        assert result.rounds[-1].moves == 0
        assert result.iterations == len(result.rounds)
        assert set(result.partition.labels) == set(scenario_graph.nodes)

    def test_modularity_non_decreasing(self, make_formula):
        for seed in range(8):
            graph = build_literal_graph(make_formula(12, 40, seed))
            result = detect_communities(graph, seed=seed, check_bounds=True)
            previous = result.initial_modularity
            for detection_round in result.rounds:
                assert detection_round.modularity >= previous - 1e-12
                previous = detection_round.modularity
            assert result.modularity >= result.initial_modularity

    def test_reported_modularity_matches_partition(self, make_formula):
        graph = build_literal_graph(make_formula(10, 30, 4))
        result = detect_communities(graph, seed=4)
        assert result.modularity == pytest.approx(compute_modularity(graph, result.partition))

    def test_incremental_matches_recompute(self, make_formula):
        for seed in range(6):
            graph = build_literal_graph(make_formula(9, 25, seed))
            fast = detect_communities(graph, seed=seed, move_evaluation="incremental")
            slow = detect_communities(graph, seed=seed, move_evaluation="recompute")
            assert fast.partition == slow.partition
            assert [r.moves for r in fast.rounds] == [r.moves for r in slow.rounds]

    def test_same_seed_same_partition(self, make_formula):
        graph = build_literal_graph(make_formula(15, 60, 9))
        assert (
            detect_communities(graph, seed=7).partition
            == detect_communities(graph, seed=7).partition
        )

    def test_iteration_cap(self, make_formula):
        graph = build_literal_graph(make_formula(15, 60, 2))
        result = detect_communities(graph, max_iterations=1, seed=2)
        assert result.iterations == 1
        assert result.converged is (result.rounds[0].moves == 0)

    def test_degenerate_graph(self):
        graph = build_literal_graph(formula_from_strings(["x1", "x2"], []))
        result = detect_communities(graph)
        assert result.converged
        assert result.rounds == []
        assert result.modularity == 0.0
        assert result.partition.number_of_communities == 4

    def test_does_not_modify_graph(self, scenario_graph):
        before = sorted(scenario_graph.edges())
        detect_communities(scenario_graph, seed=3)
        assert sorted(scenario_graph.edges()) == before

    def test_invalid_max_iterations(self, scenario_graph):
        with pytest.raises(ValueError, match="max_iterations"):
            detect_communities(scenario_graph, max_iterations=0)

    def test_invalid_move_evaluation(self, scenario_graph):
        with pytest.raises(ValueError, match="move evaluation"):
            detect_communities(scenario_graph, move_evaluation="exhaustive")  # type: ignore[arg-type]


class _FixedGains(_MoveEvaluator):
    def __init__(self, graph, labels, gains):
        super().__init__(graph, labels)
        self.gains = gains

    def gain(self, node, target, links):
        return self.gains[target]


class TestBestMove:
    def test_evaluator_is_abstract(self, scenario_graph):
        with pytest.raises(TypeError):
            _MoveEvaluator(scenario_graph, {})  # type: ignore[abstract]

    def test_tiny_positive_gain_selected(self, scenario_graph):
        evaluator = _FixedGains(scenario_graph, {1: 1}, {3: -0.2, 5: 5e-13})
        assert _best_move(evaluator, 1, 1, {1: 0.0, 3: 1.0, 5: 2.0}) == (5, 5e-13)

    def test_negative_best_left_to_epsilon_gate(self, scenario_graph):
        evaluator = _FixedGains(scenario_graph, {1: 1}, {3: -0.2, 5: -0.1})
        target, gain = _best_move(evaluator, 1, 1, {3: 1.0, 5: 2.0})
        assert target == 5
        assert gain == pytest.approx(-0.1)

    def test_near_tie_keeps_first_candidate(self, scenario_graph):
        evaluator = _FixedGains(scenario_graph, {1: 1}, {3: 0.1, 5: 0.1 + 1e-13})
        assert _best_move(evaluator, 1, 1, {3: 1.0, 5: 2.0})[0] == 3

    def test_no_candidates(self, scenario_graph):
        evaluator = _FixedGains(scenario_graph, {1: 1}, {})
        assert _best_move(evaluator, 1, 1, {1: 0.0})[0] is None

    def test_zero_epsilon_still_converges(self, make_formula):
        graph = build_literal_graph(make_formula(10, 30, 6))
        result = detect_communities(graph, epsilon=0.0, seed=6, check_bounds=True)
        assert result.modularity >= result.initial_modularity
        assert result.iterations <= 50
