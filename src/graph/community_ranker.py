# src/graph/community_ranker.py — v1
"""Community ranker: orders communities by modularity contribution.

Contributions are evaluated against the whole graph (global degrees and
``2m``). Ascending order, weakly cohesive communities first, is the
default; descending is available for comparison runs. Equal contributions
keep community enumeration order.
"""

from __future__ import annotations

import logging
from typing import Literal

from communitysat.graph.literal_graph import LiteralGraph
from communitysat.graph.models import RankedCommunity
from communitysat.graph.modularity import community_contribution
from communitysat.graph.partition import Partition

logger = logging.getLogger(__name__)

CommunityOrder = Literal["ascending", "descending"]


def rank_communities(
    graph: LiteralGraph,
    partition: Partition,
    order: CommunityOrder = "ascending",
) -> list[RankedCommunity]:
    """Score and sort the communities of ``partition``.

    Args:
        graph: Literal graph the partition was computed on.
        partition: Final partition.
        order: "ascending" (lowest contribution first) or "descending".

    Returns:
        Communities with ``rank`` starting at 0.
    """
    if order not in ("ascending", "descending"):
        raise ValueError(f"Unknown community order: {order!r}")

    scored = [
        (label, members, community_contribution(graph, members))
        for label, members in partition.communities().items()
    ]
    scored.sort(key=lambda item: item[2], reverse=(order == "descending"))

    ranked = [
        RankedCommunity(rank=rank, label=label, members=members, contribution=contribution)
        for rank, (label, members, contribution) in enumerate(scored)
    ]
    if ranked:
        logger.debug(
            "Ranked %d communities (%s): first=%s (%.4f), last=%s (%.4f)",
            len(ranked), order,
            ranked[0].label, ranked[0].contribution,
            ranked[-1].label, ranked[-1].contribution,
        )
    return ranked
