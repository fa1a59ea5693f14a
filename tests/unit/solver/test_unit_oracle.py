# tests/unit/solver/test_unit_oracle.py — v1
"""Tests for solver/oracle.py — exact-solver ground truth."""

from __future__ import annotations

import pytest

from communitysat.config.settings import Settings
from communitysat.solver.oracle import (
    BaseOracle,
    BruteForceOracle,
    MinisatOracle,
    build_oracle,
)
from communitysat.solver.validator import is_satisfying


class TestBruteForceOracle:
    def test_satisfiable(self, scenario_formula):
        verdict = BruteForceOracle().solve(scenario_formula)
        assert verdict is not None
        assert verdict.satisfiable
        assert verdict.solver == "brute_force"
        # First satisfying assignment in enumeration order
        assert verdict.assignment == {"x1": False, "x2": False, "x3": True}

    def test_unsatisfiable(self, unsatisfiable_formula):
        verdict = BruteForceOracle().solve(unsatisfiable_formula)
        assert verdict is not None
        assert verdict.satisfiable is False
        assert verdict.assignment is None

    def test_above_limit(self, scenario_formula):
        assert BruteForceOracle(max_variables=2).solve(scenario_formula) is None

    def test_is_oracle(self):
        assert isinstance(BruteForceOracle(), BaseOracle)


class TestMinisatOracle:
    def test_satisfiable(self, scenario_formula):
        pytest.importorskip("pysat")
        formula = scenario_formula
        verdict = MinisatOracle().solve(formula)
        assert verdict is not None
        assert verdict.satisfiable
        assert is_satisfying(formula, verdict.assignment)

    def test_unsatisfiable(self, unsatisfiable_formula):
        pytest.importorskip("pysat")
        verdict = MinisatOracle().solve(unsatisfiable_formula)
        assert verdict is not None
        assert verdict.satisfiable is False

    def test_agrees_with_brute_force(self, make_formula):
        pytest.importorskip("pysat")
        for seed in range(10):
            formula = make_formula(6, 30, seed)
            assert (
                MinisatOracle().solve(formula).satisfiable
                == BruteForceOracle().solve(formula).satisfiable
            )


class TestBuildOracle:
    def test_none(self):
        assert build_oracle(Settings(_env_file=None)) is None

    def test_brute_force(self):
        oracle = build_oracle(Settings(_env_file=None, oracle="brute_force", oracle_max_variables=12))
        assert isinstance(oracle, BruteForceOracle)
        assert oracle.max_variables == 12

    def test_minisat(self):
        assert isinstance(build_oracle(Settings(_env_file=None, oracle="minisat")), MinisatOracle)
