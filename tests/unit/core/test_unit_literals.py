# tests/unit/core/test_unit_literals.py — v1
"""Tests for core/literals.py — literal string resolution."""

from __future__ import annotations

import pytest

from communitysat.core.errors import MalformedInputError
from communitysat.core.literals import formula_from_strings, normalize_name, parse_literal
from communitysat.core.models import ClauseLiteral


class TestNormalizeName:
    def test_subscripts(self):
        assert normalize_name(" x₁₂ ") == "x12"

    def test_plain(self):
        assert normalize_name("alpha") == "alpha"


class TestParseLiteral:
    def test_positive(self):
        assert parse_literal("x3") == ClauseLiteral(variable="x3", negated=False)

    @pytest.mark.parametrize("text", ["¬x3", "~x3", "-x3", "!x3", "¬ x3", "¬x₃"])
    def test_negation_markers(self, text):
        assert parse_literal(text) == ClauseLiteral(variable="x3", negated=True)

    def test_known_variables(self):
        assert parse_literal("x1", {"x1"}).variable == "x1"

    def test_unknown_variable(self):
        with pytest.raises(MalformedInputError, match="unknown variable") as exc_info:
            parse_literal("¬x7", {"x1"}, clause_index=4)
        assert exc_info.value.clause_index == 4
        assert exc_info.value.literal == "¬x7"

    @pytest.mark.parametrize("text", ["", "¬", "¬¬x1", "x 1"])
    def test_unresolvable(self, text):
        with pytest.raises(MalformedInputError, match="Cannot resolve"):
            parse_literal(text)


class TestFormulaFromStrings:
    def test_builds_formula(self, scenario_formula):
        first = scenario_formula.clauses[0]
        assert [str(lit) for lit in first.literals] == ["x1", "¬x2", "x3"]

    def test_subscript_declarations(self):
        formula = formula_from_strings(["x₁", "x₂", "x₃"], [["x₁", "¬x₂", "~x3"]])
        assert formula.variables == ["x1", "x2", "x3"]
        assert str(formula.clauses[0]) == "(x1 ∨ ¬x2 ∨ ¬x3)"

    def test_metadata(self):
        formula = formula_from_strings(["a", "b", "c"], [], metadata={"seed": 7})
        assert formula.metadata == {"seed": 7}

    def test_string_clause_rejected(self):
        with pytest.raises(MalformedInputError, match="sequence of literals"):
            formula_from_strings(["x1", "x2", "x3"], ["x1 x2 x3"])

    def test_wrong_arity(self):
        with pytest.raises(MalformedInputError) as exc_info:
            formula_from_strings(["x1", "x2", "x3"], [["x1", "x2", "x3"], ["x1", "x2"]])
        assert exc_info.value.clause_index == 1

    def test_unknown_variable_in_clause(self):
        with pytest.raises(MalformedInputError) as exc_info:
            formula_from_strings(["x1", "x2", "x3"], [["x1", "x2", "x4"]])
        assert exc_info.value.clause_index == 0
        assert exc_info.value.literal == "x4"

    def test_repeated_variable_allowed_by_default(self):
        formula = formula_from_strings(["x1", "x2", "x3"], [["x1", "¬x1", "x2"]])
        assert formula.distinct_variable_violations() == [0]

    def test_require_distinct(self):
        with pytest.raises(MalformedInputError, match="repeats a variable") as exc_info:
            formula_from_strings(
                ["x1", "x2", "x3"],
                [["x1", "x2", "x3"], ["x1", "¬x1", "x2"]],
                require_distinct=True,
            )
        assert exc_info.value.clause_index == 1
