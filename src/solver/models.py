# src/solver/models.py — v1
"""Solver result models: assignment trace, clause evaluation, repair, oracle."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Assignment = dict[str, bool]


# === ASSIGNMENT GENERATION ===


class AssignmentDecision(BaseModel):
    """How one variable received its value."""

    variable: str
    value: bool
    source: Literal["community", "random"]
    community_rank: int | None = None
    community_label: int | None = None
    node: int | None = None
    literal: str | None = None
    positive_count: int = 0
    negative_count: int = 0
    positive_weight: float = 0.0
    negative_weight: float = 0.0
    node_degree: float = 0.0

    def describe(self) -> str:
        """One-line human-readable strategy note."""
        if self.source == "random":
            return f"{self.variable}={self.value}: not reached by any community, random fallback"
        return (
            f"{self.variable}={self.value}: community rank {self.community_rank} "
            f"(label {self.community_label}) via {self.literal}, "
            f"pos={self.positive_count} ({self.positive_weight:.3f}) "
            f"neg={self.negative_count} ({self.negative_weight:.3f})"
        )


class AssignmentOutcome(BaseModel):
    """Total assignment plus the decision trace that produced it."""

    assignment: Assignment = Field(default_factory=dict)
    trace: list[AssignmentDecision] = Field(default_factory=list)
    random_variables: list[str] = Field(default_factory=list)


# === VALIDATION ===


class LiteralEvaluation(BaseModel):
    literal: str
    variable: str
    value: bool
    satisfied: bool


class ClauseEvaluation(BaseModel):
    """Per-clause validation detail."""

    clause_index: int
    literals: list[str] = Field(default_factory=list)
    satisfied: bool = False
    satisfied_literals: int = 0
    total_literals: int = 0
    literal_details: list[LiteralEvaluation] = Field(default_factory=list)


class AssignmentQuality(BaseModel):
    """Clause satisfaction summary of one assignment."""

    satisfied_clauses: int = 0
    total_clauses: int = 0
    violated_clauses: list[int] = Field(default_factory=list)
    clause_details: list[ClauseEvaluation] = Field(default_factory=list)

    @property
    def satisfaction_rate(self) -> float:
        if self.total_clauses == 0:
            return 1.0
        return self.satisfied_clauses / self.total_clauses

    @property
    def is_satisfied(self) -> bool:
        return self.satisfied_clauses == self.total_clauses


# === REPAIR ===


class FlipRecord(BaseModel):
    variable: str
    old_value: bool
    new_value: bool
    benefit: int
    satisfied_after: int


class RepairResult(BaseModel):
    """Outcome of greedy violation repair."""

    assignment: Assignment = Field(default_factory=dict)
    flips: list[FlipRecord] = Field(default_factory=list)
    satisfied_history: list[int] = Field(default_factory=list)
    stop_reason: Literal["satisfied", "no_beneficial_flip", "budget_exhausted"]

    @property
    def flip_count(self) -> int:
        return len(self.flips)


# === ORACLE ===


class OracleVerdict(BaseModel):
    """Ground truth from an exact solver."""

    satisfiable: bool
    assignment: Assignment | None = None
    solver: str
