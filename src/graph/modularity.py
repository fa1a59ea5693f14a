# src/graph/modularity.py — v1
"""Modularity scorer for a weighted literal graph under a partition.

    Q = (1 / 2m) * sum_c sum_{i,j in c} [A(i,j) - k_i * k_j / 2m]

The inner sum ranges over ordered pairs, ``i = j`` included (``A(i,i) = 0``).
Per community it reduces to ``2 * W_in / 2m - (K_c / 2m) ** 2`` where
``W_in`` is the internal edge weight and ``K_c`` the community degree sum,
so the contribution is computed in one pass over member adjacency.
Contributions always sum to Q.

A graph with ``2m = 0`` has modularity 0.0 and every contribution is 0.0.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from communitysat.core.errors import ModularityRangeError
from communitysat.graph.literal_graph import LiteralGraph
from communitysat.graph.models import ModularityReport
from communitysat.graph.partition import Partition

logger = logging.getLogger(__name__)

MODULARITY_LOWER_BOUND = -0.5
MODULARITY_UPPER_BOUND = 1.0
BOUNDS_TOLERANCE = 1e-9


def community_contribution(graph: LiteralGraph, members: Iterable[int]) -> float:
    """Contribution of one community to global modularity.

    Degrees and ``2m`` are those of the whole graph, never of the
    community's induced subgraph.
    """
    two_m = graph.two_m
    if two_m == 0:
        return 0.0

    member_set = set(members)
    internal = 0.0  # sum of A(i,j) over ordered member pairs
    degree_sum = 0.0
    for node in member_set:
        degree_sum += graph.degree(node)
        for neighbor in graph.neighbors(node):
            if neighbor in member_set:
                internal += graph.weight(node, neighbor)

    return internal / two_m - (degree_sum / two_m) ** 2


def check_modularity_range(value: float) -> float:
    """Return ``value`` unchanged or raise ModularityRangeError."""
    if not (
        MODULARITY_LOWER_BOUND - BOUNDS_TOLERANCE
        <= value
        <= MODULARITY_UPPER_BOUND + BOUNDS_TOLERANCE
    ):
        raise ModularityRangeError(value)
    return value


def modularity_report(
    graph: LiteralGraph,
    partition: Partition,
    check_bounds: bool = False,
) -> ModularityReport:
    """Global modularity and per-community contributions.

    Args:
        graph: Literal graph.
        partition: Partition covering the graph's nodes.
        check_bounds: Raise ModularityRangeError outside [-0.5, 1.0].

    Returns:
        ModularityReport keyed by community label.
    """
    contributions = {
        label: community_contribution(graph, members)
        for label, members in partition.communities().items()
    }
    modularity = sum(contributions.values())
    if check_bounds:
        check_modularity_range(modularity)
    return ModularityReport(
        modularity=modularity,
        contributions=contributions,
        two_m=graph.two_m,
    )


def compute_modularity(
    graph: LiteralGraph,
    partition: Partition,
    check_bounds: bool = False,
) -> float:
    """Global modularity of ``partition`` on ``graph``."""
    return modularity_report(graph, partition, check_bounds=check_bounds).modularity
