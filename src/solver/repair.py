# src/solver/repair.py — v1
"""Greedy violation repair: bounded single-variable flip local search.

Each step targets the variable occurring most often across the currently
violated clauses (ties: first appearance, scanning violated clauses in
order) and flips it only when the flip strictly increases the number of
satisfied clauses over the whole formula. Satisfaction therefore never
decreases and the search stops after at most ``max_flips`` flips.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from communitysat.core.models import Formula
from communitysat.solver.models import AssignmentQuality, FlipRecord, RepairResult
from communitysat.solver.validator import count_satisfied_clauses

logger = logging.getLogger(__name__)

DEFAULT_REPAIR_THRESHOLD = 0.75
DEFAULT_MAX_FLIPS = 5


def should_attempt_repair(
    quality: AssignmentQuality,
    threshold: float = DEFAULT_REPAIR_THRESHOLD,
) -> bool:
    """True iff the assignment is unsatisfied but already near-satisfying."""
    return not quality.is_satisfied and quality.satisfaction_rate >= threshold


def _violated_clauses(formula: Formula, assignment: Mapping[str, bool]) -> list[int]:
    return [
        index for index, clause in enumerate(formula.clauses)
        if not any(lit.is_satisfied_by(assignment[lit.variable]) for lit in clause.literals)
    ]


def _most_frequent_variable(formula: Formula, violated: list[int]) -> str:
    counts: dict[str, int] = {}
    for index in violated:
        for lit in formula.clauses[index].literals:
            counts[lit.variable] = counts.get(lit.variable, 0) + 1

    best_variable, best_count = "", 0
    for variable, count in counts.items():
        if count > best_count:
            best_variable, best_count = variable, count
    return best_variable


def greedy_violation_repair(
    formula: Formula,
    assignment: Mapping[str, bool],
    *,
    max_flips: int = DEFAULT_MAX_FLIPS,
) -> RepairResult:
    """Improve ``assignment`` by at most ``max_flips`` beneficial flips.

    The input mapping is never modified.

    Returns:
        RepairResult with the repaired copy, the flip log and the satisfied
        count history (initial count first).
    """
    repaired = dict(assignment)
    satisfied = count_satisfied_clauses(formula, repaired)
    history = [satisfied]
    flips: list[FlipRecord] = []
    stop_reason = "budget_exhausted"

    for _ in range(max_flips):
        violated = _violated_clauses(formula, repaired)
        if not violated:
            stop_reason = "satisfied"
            break

        variable = _most_frequent_variable(formula, violated)
        old_value = repaired[variable]
        repaired[variable] = not old_value
        after = count_satisfied_clauses(formula, repaired)
        benefit = after - satisfied

        if benefit <= 0:
            repaired[variable] = old_value
            logger.debug(
                "No beneficial flip: best candidate %s (benefit %+d)", variable, benefit,
            )
            stop_reason = "no_beneficial_flip"
            break

        satisfied = after
        history.append(satisfied)
        flips.append(FlipRecord(
            variable=variable,
            old_value=old_value,
            new_value=not old_value,
            benefit=benefit,
            satisfied_after=satisfied,
        ))
        logger.debug("Flip %d: %s %s -> %s (+%d)", len(flips), variable, old_value, not old_value, benefit)
    else:
        if not _violated_clauses(formula, repaired):
            stop_reason = "satisfied"

    logger.info(
        "Repair stopped (%s) after %d flip(s): %d/%d clauses satisfied",
        stop_reason, len(flips), satisfied, formula.num_clauses,
    )
    return RepairResult(
        assignment=repaired,
        flips=flips,
        satisfied_history=history,
        stop_reason=stop_reason,
    )
