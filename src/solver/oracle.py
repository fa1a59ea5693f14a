# src/solver/oracle.py — v1
"""Exact-solver oracles used as ground truth for the heuristic verdict.

An oracle returns None when it cannot decide (instance too large, solver
library not installed). None means "no ground truth", never "unsatisfiable".
"""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from communitysat.core.models import Formula
from communitysat.solver.models import OracleVerdict
from communitysat.solver.validator import is_satisfying

if TYPE_CHECKING:
    from communitysat.config.settings import Settings

logger = logging.getLogger(__name__)

_pysat_available: bool | None = None


def _check_pysat() -> bool:
    global _pysat_available
    if _pysat_available is None:
        try:
            import pysat.solvers  # noqa: F401

            _pysat_available = True
        except ImportError:
            _pysat_available = False
            logger.info("python-sat not installed, MiniSat oracle gives no ground truth")
    return _pysat_available


class BaseOracle(ABC):
    """Decides satisfiability of a formula exactly."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Oracle identifier (e.g., 'brute_force')."""

    @abstractmethod
    def solve(self, formula: Formula) -> OracleVerdict | None:
        """Return the verdict, or None when no ground truth is available."""


class BruteForceOracle(BaseOracle):
    """Enumerates all ``2^n`` assignments in lexicographic order (False first)."""

    def __init__(self, max_variables: int = 20) -> None:
        self.max_variables = max_variables

    @property
    def name(self) -> str:
        return "brute_force"

    def solve(self, formula: Formula) -> OracleVerdict | None:
        if formula.num_variables > self.max_variables:
            logger.info(
                "Brute force skipped: %d variables exceed limit of %d",
                formula.num_variables, self.max_variables,
            )
            return None

        for values in itertools.product((False, True), repeat=formula.num_variables):
            candidate = dict(zip(formula.variables, values))
            if is_satisfying(formula, candidate):
                return OracleVerdict(satisfiable=True, assignment=candidate, solver=self.name)
        return OracleVerdict(satisfiable=False, solver=self.name)


class MinisatOracle(BaseOracle):
    """MiniSat 2.2 through python-sat."""

    @property
    def name(self) -> str:
        return "minisat"

    def solve(self, formula: Formula) -> OracleVerdict | None:
        if not _check_pysat():
            return None
        from pysat.solvers import Minisat22

        ids = {variable: index for index, variable in enumerate(formula.variables, start=1)}
        cnf = [
            [-ids[lit.variable] if lit.negated else ids[lit.variable] for lit in clause.literals]
            for clause in formula.clauses
        ]
        with Minisat22(bootstrap_with=cnf) as m:
            if not m.solve():
                return OracleVerdict(satisfiable=False, solver=self.name)
            model = set(m.get_model() or [])

        assignment = {variable: ids[variable] in model for variable in formula.variables}
        return OracleVerdict(satisfiable=True, assignment=assignment, solver=self.name)


def build_oracle(settings: Settings) -> BaseOracle | None:
    """Instantiate the oracle selected by ``settings.oracle`` (None for 'none')."""
    if settings.oracle == "brute_force":
        return BruteForceOracle(max_variables=settings.oracle_max_variables)
    if settings.oracle == "minisat":
        return MinisatOracle()
    return None
