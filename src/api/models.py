# src/api/models.py — v1
"""API-level models: SolveOverrides, SolveResult."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from communitysat.graph.models import DetectionRound, RankedCommunity
from communitysat.solver.models import (
    AssignmentDecision,
    AssignmentQuality,
    OracleVerdict,
    RepairResult,
)


class SolveOverrides(BaseModel):
    """Per-solve overrides, a validated subset of Settings.

    Only fields explicitly set are applied, so ``random_seed=None`` requests
    a non-deterministic run rather than leaving the seed unchanged.
    """

    detection_max_iterations: int | None = None
    detection_epsilon: float | None = None
    detection_move_evaluation: Literal["incremental", "recompute"] | None = None
    check_modularity_bounds: bool | None = None
    community_order: Literal["ascending", "descending"] | None = None
    node_order: Literal["ascending", "descending"] | None = None
    random_seed: int | None = None
    repair_enabled: bool | None = None
    repair_threshold: float | None = None
    repair_max_flips: int | None = None
    oracle: Literal["none", "brute_force", "minisat"] | None = None
    oracle_max_variables: int | None = None


class SolveResult(BaseModel):
    """Return value of facade.solve()."""

    solve_id: str
    assignment: dict[str, bool] = Field(default_factory=dict)
    satisfiable: bool = False

    # Community structure
    partition: dict[int, int] = Field(default_factory=dict)
    communities: dict[int, list[int]] = Field(default_factory=dict)
    modularity: float = 0.0
    community_contributions: dict[int, float] = Field(default_factory=dict)
    ranked_communities: list[RankedCommunity] = Field(default_factory=list)
    detection_rounds: list[DetectionRound] = Field(default_factory=list)
    converged: bool = False

    # Assignment and validation
    assignment_trace: list[AssignmentDecision] = Field(default_factory=list)
    random_variables: list[str] = Field(default_factory=list)
    quality: AssignmentQuality
    initial_quality: AssignmentQuality

    # Repair
    repair_attempted: bool = False
    repair: RepairResult | None = None
    flip_count: int = 0

    # Ground truth
    ground_truth: OracleVerdict | None = None
    agrees_with_ground_truth: bool | None = None

    solve_time_s: float = 0.0

    @property
    def strategy(self) -> list[str]:
        """Human-readable assignment notes in decision order."""
        return [decision.describe() for decision in self.assignment_trace]
