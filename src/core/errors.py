# src/core/errors.py — v1
"""Error taxonomy shared by the formula model, graph and solver layers.

Degenerate graphs and assignments that stay unsatisfied after repair are
normal outcomes and have no exception type.
"""

from __future__ import annotations


class MalformedInputError(Exception):
    """Raised when a formula, literal, assignment or edge list cannot be resolved.

    Deliberately not a ValueError: pydantic would wrap a ValueError raised
    inside a validator into a ValidationError and lose the attributes below.
    """

    def __init__(
        self,
        message: str,
        *,
        clause_index: int | None = None,
        literal: str | None = None,
        line_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.clause_index = clause_index
        self.literal = literal
        self.line_number = line_number


class ModularityRangeError(AssertionError):
    """Raised when a computed modularity falls outside [-0.5, 1.0]."""

    def __init__(self, value: float) -> None:
        super().__init__(
            f"Modularity {value:.6f} outside [-0.5, 1.0]: degree accounting is inconsistent"
        )
        self.value = value
