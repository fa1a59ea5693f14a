# src/solver/validator.py — v1
"""Assignment validator: evaluates every clause under a total assignment.

Pure function. The full per-clause and per-literal detail is produced
whether or not the assignment satisfies the formula.
"""

from __future__ import annotations

from collections.abc import Mapping

from communitysat.core.errors import MalformedInputError
from communitysat.core.models import Formula
from communitysat.solver.models import (
    AssignmentQuality,
    ClauseEvaluation,
    LiteralEvaluation,
)


def _require_total(formula: Formula, assignment: Mapping[str, bool]) -> None:
    missing = [v for v in formula.variables if v not in assignment]
    if missing:
        raise MalformedInputError(
            f"Assignment has no value for {len(missing)} variable(s): {', '.join(missing)}",
            literal=missing[0],
        )


def evaluate_assignment(formula: Formula, assignment: Mapping[str, bool]) -> AssignmentQuality:
    """Evaluate ``assignment`` against every clause of ``formula``.

    Raises:
        MalformedInputError: A formula variable has no value.
    """
    _require_total(formula, assignment)

    details: list[ClauseEvaluation] = []
    violated: list[int] = []
    for index, clause in enumerate(formula.clauses):
        literal_details = [
            LiteralEvaluation(
                literal=str(lit),
                variable=lit.variable,
                value=assignment[lit.variable],
                satisfied=lit.is_satisfied_by(assignment[lit.variable]),
            )
            for lit in clause.literals
        ]
        hits = sum(1 for d in literal_details if d.satisfied)
        if hits == 0:
            violated.append(index)
        details.append(ClauseEvaluation(
            clause_index=index,
            literals=[d.literal for d in literal_details],
            satisfied=hits > 0,
            satisfied_literals=hits,
            total_literals=len(literal_details),
            literal_details=literal_details,
        ))

    return AssignmentQuality(
        satisfied_clauses=len(details) - len(violated),
        total_clauses=len(details),
        violated_clauses=violated,
        clause_details=details,
    )


def count_satisfied_clauses(formula: Formula, assignment: Mapping[str, bool]) -> int:
    """Number of clauses with at least one satisfied literal."""
    _require_total(formula, assignment)
    return sum(
        1 for clause in formula.clauses
        if any(lit.is_satisfied_by(assignment[lit.variable]) for lit in clause.literals)
    )


def is_satisfying(formula: Formula, assignment: Mapping[str, bool]) -> bool:
    return count_satisfied_clauses(formula, assignment) == formula.num_clauses
