# src/__init__.py — v1
"""communitysat: community-guided variable assignment for 3-SAT formulas.

Usage:
    from communitysat.api.facade import solve
    from communitysat.core.literals import formula_from_strings

    formula = formula_from_strings(["x1", "x2", "x3"], [["x1", "¬x2", "x3"]])
    result = solve(formula)
"""

from communitysat.version import __version__

__all__ = ["__version__"]
