# src/core/literals.py — v1
"""Literal string resolution: turns ``"¬x₂"``-style text into ClauseLiteral.

Accepted negation markers: ``¬``, ``~``, ``-`` and ``!``. Unicode subscript
digits are normalized (``x₁`` -> ``x1``) in both variable declarations and
literals, so formulas written in the markdown instance style resolve to the
same names as plain ASCII ones.
"""

from __future__ import annotations

import logging
from collections.abc import Container, Mapping, Sequence
from typing import Any

from communitysat.core.errors import MalformedInputError
from communitysat.core.models import Clause, ClauseLiteral, Formula

logger = logging.getLogger(__name__)

NEGATION_MARKERS = ("¬", "~", "-", "!")

_SUBSCRIPT_DIGITS = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")


def normalize_name(text: str) -> str:
    """Strip whitespace and replace subscript digits with ASCII digits."""
    return text.strip().translate(_SUBSCRIPT_DIGITS)


def parse_literal(
    text: str,
    known_variables: Container[str] | None = None,
    clause_index: int | None = None,
) -> ClauseLiteral:
    """Resolve one literal string.

    Args:
        text: Literal text, e.g. ``"x3"``, ``"¬x3"``, ``"~x₃"``.
        known_variables: If given, the variable must be declared here.
        clause_index: Clause position, attached to any raised error.

    Returns:
        The resolved ClauseLiteral.

    Raises:
        MalformedInputError: Empty literal, bare or repeated negation marker,
            or unknown variable.
    """
    body = normalize_name(text)
    negated = False
    if body.startswith(NEGATION_MARKERS):
        negated = True
        body = body[1:].strip()

    if not body or body.startswith(NEGATION_MARKERS) or any(ch.isspace() for ch in body):
        raise MalformedInputError(
            f"Cannot resolve literal {text!r}", clause_index=clause_index, literal=text,
        )

    if known_variables is not None and body not in known_variables:
        raise MalformedInputError(
            f"Literal {text!r} references unknown variable {body!r}",
            clause_index=clause_index,
            literal=text,
        )
    return ClauseLiteral(variable=body, negated=negated)


def formula_from_strings(
    variables: Sequence[str],
    clauses: Sequence[Sequence[str]],
    metadata: Mapping[str, Any] | None = None,
    require_distinct: bool = False,
) -> Formula:
    """Build a Formula from a variable list and clauses of literal strings.

    Args:
        variables: Variable names in declaration order.
        clauses: One sequence of literal strings per clause.
        metadata: Free-form instance metadata (seed, generator, ratio...).
        require_distinct: Also reject clauses that repeat a variable.

    Returns:
        Validated Formula.

    Raises:
        MalformedInputError: On the first clause or literal that cannot be
            resolved, or on a clause without exactly 3 literals.
    """
    names = [normalize_name(v) for v in variables]
    declared = set(names)

    parsed: list[Clause] = []
    for index, raw_clause in enumerate(clauses):
        if isinstance(raw_clause, str):
            raise MalformedInputError(
                f"Clause {index} must be a sequence of literals, got a string",
                clause_index=index,
            )
        literals = tuple(
            parse_literal(text, declared, clause_index=index) for text in raw_clause
        )
        parsed.append(Clause(literals=literals))

    formula = Formula(variables=names, clauses=parsed, metadata=dict(metadata or {}))

    if require_distinct:
        violations = formula.distinct_variable_violations()
        if violations:
            first = violations[0]
            raise MalformedInputError(
                f"Clause {first} repeats a variable: {formula.clauses[first]} "
                f"({len(violations)} clause(s) affected)",
                clause_index=first,
            )

    logger.debug(
        "Resolved formula: %d variables, %d clauses",
        formula.num_variables, formula.num_clauses,
    )
    return formula
