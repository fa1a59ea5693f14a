# src/logging/context.py — v1
"""Contextual logging support: attach solve_id and pipeline stage to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set once per solve() call, stage updated as the pipeline advances.
_solve_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "solve_id", default=None
)
_stage: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stage", default=None
)

STAGES = (
    "graph",
    "detection",
    "ranking",
    "assignment",
    "validation",
    "repair",
    "oracle",
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    solve_id: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(solve_id=_solve_id.get(), stage=_stage.get())


def set_solve_context(solve_id: str) -> None:
    """Set solve-level context (called once per solve)."""
    _solve_id.set(solve_id)
    _stage.set(None)


def set_stage_context(stage: str) -> None:
    """Set the current pipeline stage."""
    if stage not in STAGES:
        raise ValueError(f"Unknown pipeline stage: {stage!r}")
    _stage.set(stage)


def clear_context() -> None:
    """Reset all context variables."""
    _solve_id.set(None)
    _stage.set(None)
