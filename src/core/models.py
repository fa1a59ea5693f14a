# src/core/models.py — v1
"""Shared Pydantic formula models used across modules.

No module redefines these types: literals, clauses and formulas are always
imported from core.models. Construction validates the structural contract
(unique variables, 3 literals per clause, every literal resolvable) and
raises MalformedInputError on the first offending clause or literal.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from communitysat.core.errors import MalformedInputError

NEGATION_SYMBOL = "¬"
CLAUSE_SIZE = 3


# === LITERALS & CLAUSES ===


class ClauseLiteral(BaseModel):
    """A variable or its negation, e.g. ``x3`` or ``¬x3``."""

    model_config = ConfigDict(frozen=True)

    variable: str
    negated: bool = False

    def __str__(self) -> str:
        return f"{NEGATION_SYMBOL}{self.variable}" if self.negated else self.variable

    def negation(self) -> ClauseLiteral:
        """Return the complementary literal."""
        return ClauseLiteral(variable=self.variable, negated=not self.negated)

    def is_satisfied_by(self, value: bool) -> bool:
        """Positive literal holds when the variable is true, negative when false."""
        return value != self.negated


class Clause(BaseModel):
    """Disjunction of literals."""

    model_config = ConfigDict(frozen=True)

    literals: tuple[ClauseLiteral, ...]

    def __str__(self) -> str:
        return "(" + " ∨ ".join(str(lit) for lit in self.literals) + ")"

    @property
    def variables(self) -> list[str]:
        return [lit.variable for lit in self.literals]

    def has_distinct_variables(self) -> bool:
        return len(set(self.variables)) == len(self.literals)


# === FORMULA ===


class Formula(BaseModel):
    """3-SAT formula: ordered unique variables and ordered clauses."""

    variables: list[str]
    clauses: list[Clause] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_structure(self) -> Formula:
        """Reject duplicate variables, wrong clause arity and unknown literals."""
        declared: set[str] = set()
        for name in self.variables:
            if not name or not name.strip():
                raise MalformedInputError("Variable names must be non-empty strings")
            if name in declared:
                raise MalformedInputError(f"Duplicate variable name: {name!r}")
            declared.add(name)

        for index, clause in enumerate(self.clauses):
            if len(clause.literals) != CLAUSE_SIZE:
                raise MalformedInputError(
                    f"Clause {index} has {len(clause.literals)} literals "
                    f"(expected {CLAUSE_SIZE}): {clause}",
                    clause_index=index,
                )
            for lit in clause.literals:
                if lit.variable not in declared:
                    raise MalformedInputError(
                        f"Clause {index} references unknown variable "
                        f"{lit.variable!r} in literal {str(lit)!r}",
                        clause_index=index,
                        literal=str(lit),
                    )
        return self

    @property
    def num_variables(self) -> int:
        return len(self.variables)

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)

    @property
    def ratio(self) -> float:
        """Clause-to-variable ratio (0.0 for a formula without variables)."""
        if not self.variables:
            return 0.0
        return len(self.clauses) / len(self.variables)

    def distinct_variable_violations(self) -> list[int]:
        """Indices of clauses that repeat a variable.

        The instance generator guarantees 3 distinct variables per clause;
        this check only runs when a caller asks for it.
        """
        return [
            index for index, clause in enumerate(self.clauses)
            if not clause.has_distinct_variables()
        ]

    def __str__(self) -> str:
        return " ∧ ".join(str(clause) for clause in self.clauses)
