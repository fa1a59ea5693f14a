# src/graph/community_detector.py — v1
"""Modularity-driven local-moving community detection (label propagation).

Pure function: takes a LiteralGraph, returns a DetectionResult. Does NOT
modify the input graph. The label table is private to one call and is
published as a new Partition after every round.

Each round visits the nodes in a shuffled order. A node may move to any
label held by one of its neighbors; the move with the largest modularity
gain is applied when the gain exceeds ``epsilon``. Candidates whose gains
differ by less than TIE_TOLERANCE are ties, and the first enumerated one
wins. A round without moves means convergence. Isolated nodes never move.

Two move evaluators select the same moves:
    - "incremental": closed-form delta over maintained community degree sums
      dQ = 2 (k_v,b - k_v,a) / 2m - 2 k_v (K_b - K_a + k_v) / (2m)^2
    - "recompute": re-derives global modularity for every candidate
"""

from __future__ import annotations

import logging
import math
import random
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Literal

from communitysat.graph.literal_graph import LiteralGraph
from communitysat.graph.models import DetectionResult, DetectionRound
from communitysat.graph.modularity import compute_modularity
from communitysat.graph.partition import Partition

logger = logging.getLogger(__name__)

MoveEvaluation = Literal["incremental", "recompute"]

DEFAULT_MAX_ITERATIONS = 50
DEFAULT_EPSILON = 1e-8
TIE_TOLERANCE = 1e-12


def detect_communities(
    graph: LiteralGraph,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    epsilon: float = DEFAULT_EPSILON,
    seed: int | None = None,
    move_evaluation: MoveEvaluation = "incremental",
    check_bounds: bool = False,
) -> DetectionResult:
    """Partition the literal graph by greedy modularity-improving relabeling.

    Args:
        graph: Literal co-occurrence graph.
        max_iterations: Maximum number of rounds.
        epsilon: Minimum gain for a move to be applied.
        seed: Seed of the visitation shuffle (None = non-deterministic).
        move_evaluation: "incremental" or "recompute".
        check_bounds: Raise ModularityRangeError on out-of-range modularity.

    Returns:
        DetectionResult with the final partition and per-round history.
    """
    if max_iterations < 1:
        raise ValueError("max_iterations must be >= 1")
    if move_evaluation not in ("incremental", "recompute"):
        raise ValueError(f"Unknown move evaluation: {move_evaluation!r}")

    labels: dict[int, int] = {node: node for node in graph.nodes}
    initial = compute_modularity(graph, Partition(labels), check_bounds=check_bounds)

    if graph.two_m == 0:
        logger.info(
            "Literal graph has no co-occurring literals, keeping %d singleton communities",
            len(labels),
        )
        return DetectionResult(
            partition=Partition(labels),
            modularity=0.0,
            initial_modularity=0.0,
            converged=True,
        )

    evaluator: _MoveEvaluator
    if move_evaluation == "incremental":
        evaluator = _IncrementalMoves(graph, labels)
    else:
        evaluator = _RecomputeMoves(graph, labels)

    rng = random.Random(seed)
    order = list(labels)
    rounds: list[DetectionRound] = []
    converged = False

    for index in range(1, max_iterations + 1):
        rng.shuffle(order)
        moves = 0
        for node in order:
            if graph.is_isolated(node):
                continue
            links = _label_links(graph, labels, node)
            target, gain = _best_move(evaluator, node, labels[node], links)
            if target is not None and gain > epsilon:
                evaluator.apply(node, target)
                moves += 1

        modularity = compute_modularity(graph, Partition(labels), check_bounds=check_bounds)
        rounds.append(DetectionRound(index=index, moves=moves, modularity=modularity))
        logger.debug("Round %d: %d move(s), modularity=%.6f", index, moves, modularity)

        if moves == 0:
            converged = True
            break

    partition = Partition(labels)
    logger.info(
        "Community detection %s after %d round(s): %d communities, modularity=%.4f",
        "converged" if converged else "hit the iteration cap",
        len(rounds),
        partition.number_of_communities,
        rounds[-1].modularity,
    )
    return DetectionResult(
        partition=partition,
        modularity=rounds[-1].modularity,
        initial_modularity=initial,
        rounds=rounds,
        converged=converged,
    )


def _label_links(graph: LiteralGraph, labels: dict[int, int], node: int) -> dict[int, float]:
    """Weight from ``node`` to each neighboring label, in adjacency order."""
    links: dict[int, float] = {}
    for neighbor in graph.neighbors(node):
        label = labels[neighbor]
        links[label] = links.get(label, 0.0) + graph.weight(node, neighbor)
    return links


def _best_move(
    evaluator: _MoveEvaluator,
    node: int,
    current: int,
    links: dict[int, float],
) -> tuple[int | None, float]:
    best_label: int | None = None
    best_gain = -math.inf
    for candidate in links:
        if candidate == current:
            continue
        gain = evaluator.gain(node, candidate, links)
        if gain > best_gain + TIE_TOLERANCE:
            best_label, best_gain = candidate, gain
    return best_label, best_gain


class _MoveEvaluator(ABC):
    """Scores and applies single-node relabelings on a shared label table."""

    def __init__(self, graph: LiteralGraph, labels: dict[int, int]) -> None:
        self.graph = graph
        self.labels = labels

    @abstractmethod
    def gain(self, node: int, target: int, links: dict[int, float]) -> float:
        """Modularity change if ``node`` moved to label ``target``."""

    def apply(self, node: int, target: int) -> None:
        self.labels[node] = target


class _RecomputeMoves(_MoveEvaluator):
    def __init__(self, graph: LiteralGraph, labels: dict[int, int]) -> None:
        super().__init__(graph, labels)
        self._current = compute_modularity(graph, Partition(labels))

    def gain(self, node: int, target: int, links: dict[int, float]) -> float:
        trial = dict(self.labels)
        trial[node] = target
        return compute_modularity(self.graph, Partition(trial)) - self._current

    def apply(self, node: int, target: int) -> None:
        super().apply(node, target)
        self._current = compute_modularity(self.graph, Partition(self.labels))


class _IncrementalMoves(_MoveEvaluator):
    def __init__(self, graph: LiteralGraph, labels: dict[int, int]) -> None:
        super().__init__(graph, labels)
        self._community_degree: dict[int, float] = defaultdict(float)
        for node, label in labels.items():
            self._community_degree[label] += graph.degree(node)

    def gain(self, node: int, target: int, links: dict[int, float]) -> float:
        two_m = self.graph.two_m
        k_v = self.graph.degree(node)
        source = self.labels[node]
        internal_delta = links.get(target, 0.0) - links.get(source, 0.0)
        degree_delta = (
            self._community_degree[target] - self._community_degree[source] + k_v
        )
        return 2 * internal_delta / two_m - 2 * k_v * degree_delta / two_m ** 2

    def apply(self, node: int, target: int) -> None:
        k_v = self.graph.degree(node)
        self._community_degree[self.labels[node]] -= k_v
        self._community_degree[target] += k_v
        super().apply(node, target)
