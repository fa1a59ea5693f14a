# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides the small reference formulas used across layers, a seeded random
3-SAT generator, and settings with modularity bounds checking enabled.
No external dependencies beyond the package itself.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from communitysat.config.settings import Settings
from communitysat.core.literals import formula_from_strings
from communitysat.core.models import Formula
from communitysat.graph.builder import build_literal_graph
from communitysat.graph.literal_graph import LiteralGraph
from communitysat.logging.context import clear_context


# === FIXTURES: Formulas ===


@pytest.fixture
def two_clause_formula() -> Formula:
    """(x1 ∨ x2 ∨ ¬x3) ∧ (¬x1 ∨ x2 ∨ x3)."""
    return formula_from_strings(
        ["x1", "x2", "x3"],
        [["x1", "x2", "¬x3"], ["¬x1", "x2", "x3"]],
    )


@pytest.fixture
def scenario_formula() -> Formula:
    """(x1 ∨ ¬x2 ∨ x3) ∧ (¬x1 ∨ x2 ∨ ¬x3) ∧ (x1 ∨ x2 ∨ x3)."""
    return formula_from_strings(
        ["x1", "x2", "x3"],
        [["x1", "¬x2", "x3"], ["¬x1", "x2", "¬x3"], ["x1", "x2", "x3"]],
    )


@pytest.fixture
def scenario_graph(scenario_formula: Formula) -> LiteralGraph:
    """Literal graph of scenario_formula.

    Nodes: x1=1 ¬x1=2 x2=3 ¬x2=4 x3=5 ¬x3=6. Edge (1, 5) has weight 2,
    the other seven edges weight 1; degrees 4,2,4,2,4,2; 2m = 18.
    """
    return build_literal_graph(scenario_formula)


@pytest.fixture
def near_miss_formula() -> Formula:
    """Polarity choice sets every variable true and violates only clause 3."""
    return formula_from_strings(
        ["x1", "x2", "x3", "x4"],
        [
            ["x1", "x2", "x3"],
            ["x1", "x2", "x4"],
            ["x1", "x3", "x4"],
            ["¬x1", "¬x2", "¬x3"],
        ],
    )


@pytest.fixture
def unsatisfiable_formula() -> Formula:
    """All eight sign patterns over x1, x2, x3."""
    clauses = []
    for mask in range(8):
        clauses.append([
            ("¬" if mask & (1 << bit) else "") + name
            for bit, name in enumerate(["x1", "x2", "x3"])
        ])
    return formula_from_strings(["x1", "x2", "x3"], clauses)


@pytest.fixture
def make_formula() -> Callable[[int, int, int], Formula]:
    """Factory for seeded random 3-SAT formulas with distinct variables per clause."""

    def _make(num_vars: int, num_clauses: int, seed: int) -> Formula:
        rng = random.Random(seed)
        variables = [f"x{i}" for i in range(1, num_vars + 1)]
        clauses = []
        for _ in range(num_clauses):
            chosen = rng.sample(variables, 3)
            clauses.append([("¬" if rng.random() < 0.5 else "") + v for v in chosen])
        return formula_from_strings(
            variables, clauses, metadata={"seed": seed}, require_distinct=True,
        )

    return _make


# === FIXTURES: Settings & context ===


@pytest.fixture
def checked_settings() -> Settings:
    """Default settings, isolated from .env, with modularity bounds checking on."""
    return Settings(_env_file=None, check_modularity_bounds=True)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()
