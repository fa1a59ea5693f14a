# src/solver/assignment.py — v1
"""Community-guided assignment generator.

Walks the ranked communities in order. Inside a community, members whose
variable is still unresolved are visited by weighted degree (stable sort),
and the first literal reached fixes its variable by clause-weighted
polarity: every clause containing the positive literal adds
``1 / len(clause)`` to the positive side, and likewise for the negative
side. The value is ``positive >= negative``. A resolved variable is locked.

Variables that no community reaches get a seeded coin flip.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Literal

from communitysat.core.models import Formula
from communitysat.graph.literal_graph import LiteralGraph
from communitysat.graph.models import RankedCommunity
from communitysat.solver.models import AssignmentDecision, AssignmentOutcome

logger = logging.getLogger(__name__)

NodeOrder = Literal["ascending", "descending"]


@dataclass
class PolarityStats:
    """Occurrence counts and clause-weighted contributions of one variable."""

    positive_count: int = 0
    negative_count: int = 0
    positive_weight: float = 0.0
    negative_weight: float = 0.0

    @property
    def preferred_value(self) -> bool:
        return self.positive_weight >= self.negative_weight


def polarity_stats(formula: Formula) -> dict[str, PolarityStats]:
    """Polarity statistics for every declared variable in one pass."""
    stats = {variable: PolarityStats() for variable in formula.variables}
    for clause in formula.clauses:
        clause_weight = 1.0 / len(clause.literals)
        positive_seen: set[str] = set()
        negative_seen: set[str] = set()
        for lit in clause.literals:
            entry = stats[lit.variable]
            if lit.negated:
                entry.negative_count += 1
                negative_seen.add(lit.variable)
            else:
                entry.positive_count += 1
                positive_seen.add(lit.variable)
        for variable in positive_seen:
            stats[variable].positive_weight += clause_weight
        for variable in negative_seen:
            stats[variable].negative_weight += clause_weight
    return stats


def generate_assignment(
    formula: Formula,
    graph: LiteralGraph,
    ranked: list[RankedCommunity],
    *,
    node_order: NodeOrder = "ascending",
    seed: int | None = None,
) -> AssignmentOutcome:
    """Resolve every variable by walking ranked communities.

    Args:
        formula: Validated formula.
        graph: Literal graph of ``formula``.
        ranked: Communities in processing order.
        node_order: Degree order within a community.
        seed: Seed of the random fallback (None = non-deterministic).

    Returns:
        AssignmentOutcome with the assignment in formula variable order.
    """
    if node_order not in ("ascending", "descending"):
        raise ValueError(f"Unknown node order: {node_order!r}")

    stats = polarity_stats(formula)
    resolved: dict[str, bool] = {}
    trace: list[AssignmentDecision] = []

    for community in ranked:
        pending = [
            node for node in community.members
            if graph.variable_of(node) not in resolved
        ]
        pending.sort(key=graph.degree, reverse=(node_order == "descending"))

        for node in pending:
            variable = graph.variable_of(node)
            if variable in resolved:
                continue
            entry = stats[variable]
            value = entry.preferred_value
            resolved[variable] = value
            decision = AssignmentDecision(
                variable=variable,
                value=value,
                source="community",
                community_rank=community.rank,
                community_label=community.label,
                node=node,
                literal=str(graph.literal_of(node)),
                positive_count=entry.positive_count,
                negative_count=entry.negative_count,
                positive_weight=entry.positive_weight,
                negative_weight=entry.negative_weight,
                node_degree=graph.degree(node),
            )
            trace.append(decision)
            logger.debug(decision.describe())

    rng = random.Random(seed)
    random_variables: list[str] = []
    for variable in formula.variables:
        if variable in resolved:
            continue
        value = rng.random() < 0.5
        resolved[variable] = value
        random_variables.append(variable)
        trace.append(AssignmentDecision(variable=variable, value=value, source="random"))

    if random_variables:
        logger.info(
            "%d variable(s) not reached by any community, assigned randomly: %s",
            len(random_variables), ", ".join(random_variables),
        )

    return AssignmentOutcome(
        assignment={variable: resolved[variable] for variable in formula.variables},
        trace=trace,
        random_variables=random_variables,
    )
