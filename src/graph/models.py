# src/graph/models.py — v1
"""Community structure models: ModularityReport, DetectionRound,
DetectionResult, RankedCommunity.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from communitysat.graph.partition import Partition


class ModularityReport(BaseModel):
    """Global modularity plus each community's additive contribution."""

    modularity: float = 0.0
    contributions: dict[int, float] = Field(default_factory=dict)
    two_m: float = 0.0


class DetectionRound(BaseModel):
    """Outcome of one local-moving round."""

    index: int
    moves: int
    modularity: float


class DetectionResult(BaseModel):
    """Final partition and convergence history of the community detector."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    partition: Partition
    modularity: float = 0.0
    initial_modularity: float = 0.0
    rounds: list[DetectionRound] = Field(default_factory=list)
    converged: bool = False

    @property
    def iterations(self) -> int:
        return len(self.rounds)

    @property
    def total_moves(self) -> int:
        return sum(r.moves for r in self.rounds)


class RankedCommunity(BaseModel):
    """Community with its rank and contribution under the full partition."""

    rank: int
    label: int
    members: list[int] = Field(default_factory=list)
    contribution: float = 0.0
