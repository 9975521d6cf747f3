"""Tests for rule_engine/evaluator.py — condition operators and rule combination."""

from __future__ import annotations

import pytest

from formrules.rule_engine.evaluator import evaluate_condition, evaluate_rule
from formrules.rule_engine.models import Condition, Rule


def _cond(field: str, operator: str, value: object = None) -> Condition:
    return Condition(field=field, operator=operator, value=value)


def _holds(field_value: object, operator: str, value: object = None) -> bool:
    return evaluate_condition(_cond("f", operator, value), {"f": field_value})


# ---------------------------------------------------------------------------
# equals / not_equals
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestEquality:
    def test_equal_strings(self):
        assert _holds("blue", "equals", "blue") is True

    def test_equals_is_case_sensitive(self):
        assert _holds("Blue", "equals", "blue") is False

    def test_boolean_field_matches_string_value(self):
        condition = _cond("consent", "equals", "true")
        assert evaluate_condition(condition, {"consent": True}) is True

    def test_boolean_condition_value_matches_string_field(self):
        assert _holds("false", "equals", False) is True

    def test_boolean_mismatch(self):
        assert _holds(False, "equals", "true") is False

    def test_no_string_number_coercion_without_booleans(self):
        assert _holds(5, "equals", "5") is False

    def test_not_equals_with_boolean_coercion(self):
        assert _holds(True, "not_equals", "true") is False
        assert _holds(True, "not_equals", "false") is True

    def test_not_equals_missing_field(self):
        assert evaluate_condition(_cond("x", "not_equals", "a"), {}) is True

    def test_missing_field_against_boolean(self):
        assert evaluate_condition(_cond("x", "equals", True), {}) is False


# ---------------------------------------------------------------------------
# is_empty / is_not_empty
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestEmptiness:
    @pytest.mark.parametrize(
        "value, empty",
        [
            ("", True),
            (None, True),
            ("  ", True),
            ("x", False),
            (0, True),
            (False, True),
            (True, False),
            ([], True),
            (["a"], False),
            ({"postcode": ""}, False),
        ],
    )
    def test_emptiness_operators_are_complements(self, value: object, empty: bool):
        assert _holds(value, "is_empty") is empty
        assert _holds(value, "is_not_empty") is (not empty)

    def test_missing_field_is_empty(self):
        assert evaluate_condition(_cond("nope", "is_empty"), {}) is True
        assert evaluate_condition(_cond("nope", "is_not_empty"), {}) is False


# ---------------------------------------------------------------------------
# contains / not_contains
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestContains:
    def test_case_insensitive_substring(self):
        assert _holds("Hello World", "contains", "WORLD") is True

    def test_substring_absent(self):
        assert _holds("Hello", "contains", "bye") is False

    def test_falsy_field_never_contains(self):
        assert _holds("", "contains", "") is False
        assert _holds(None, "contains", "a") is False

    def test_falsy_field_always_not_contains(self):
        assert _holds(None, "not_contains", "a") is True
        assert _holds(0, "not_contains", "0") is True

    def test_not_contains(self):
        assert _holds("sales lead", "not_contains", "LEAD") is False
        assert _holds("sales lead", "not_contains", "cold") is True

    def test_multi_select_list_is_joined(self):
        assert _holds(["Red", "Green"], "contains", "green") is True

    def test_number_field_is_stringified(self):
        assert _holds(1234, "contains", "23") is True


# ---------------------------------------------------------------------------
# greater_than / less_than
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestNumericComparison:
    def test_string_numbers_are_coerced(self):
        assert _holds("20", "greater_than", "18") is True
        assert _holds("16", "less_than", "18") is True

    def test_boundary_is_exclusive(self):
        assert _holds("18", "greater_than", "18") is False
        assert _holds("18", "less_than", "18") is False

    def test_non_numeric_field_is_false_both_ways(self):
        assert _holds("abc", "greater_than", "1") is False
        assert _holds("abc", "less_than", "1") is False

    def test_missing_field_is_false_both_ways(self):
        assert evaluate_condition(_cond("age", "less_than", "18"), {}) is False
        assert evaluate_condition(_cond("age", "greater_than", "18"), {}) is False

    def test_blank_string_counts_as_zero(self):
        assert _holds("", "less_than", "1") is True

    def test_boolean_counts_as_one(self):
        assert _holds(True, "greater_than", "0") is True

    def test_decimal_values(self):
        assert _holds("2.5", "greater_than", "2.25") is True


@pytest.mark.unit
def test_unknown_operator_is_false():
    assert _holds("x", "starts_with", "x") is False


@pytest.mark.unit
def test_empty_operator_is_false():
    assert _holds("x", "", "x") is False


# ---------------------------------------------------------------------------
# evaluate_rule
# ---------------------------------------------------------------------------


def _rule(logic: str, *conditions: Condition) -> Rule:
    return Rule(id="r", conditions=list(conditions), actions=[], logic_operator=logic)


@pytest.mark.unit
class TestEvaluateRule:
    def test_no_conditions_never_fires(self):
        assert evaluate_rule(_rule("AND"), {"a": "1"}) is False
        assert evaluate_rule(_rule("OR"), {"a": "1"}) is False

    def test_and_requires_every_condition(self):
        rule = _rule("AND", _cond("a", "equals", "1"), _cond("b", "equals", "2"))
        assert evaluate_rule(rule, {"a": "1", "b": "2"}) is True
        assert evaluate_rule(rule, {"a": "1", "b": "9"}) is False

    def test_or_requires_any_condition(self):
        rule = _rule("OR", _cond("a", "equals", "1"), _cond("b", "equals", "2"))
        assert evaluate_rule(rule, {"a": "1", "b": "9"}) is True
        assert evaluate_rule(rule, {"a": "0", "b": "9"}) is False

    def test_incomplete_condition_fails_and_rule(self):
        rule = _rule("AND", _cond("a", "equals", "1"), _cond("", "equals", "2"))
        assert evaluate_rule(rule, {"a": "1"}) is False

    def test_incomplete_condition_is_skipped_by_or_rule(self):
        rule = _rule("OR", _cond("a", "", "1"), _cond("b", "equals", "2"))
        assert evaluate_rule(rule, {"b": "2"}) is True

    def test_only_incomplete_conditions_never_fire(self):
        assert evaluate_rule(_rule("AND", _cond("", "is_empty")), {}) is False
        assert evaluate_rule(_rule("OR", _cond("", "is_empty")), {}) is False

    def test_unrecognised_logic_operator_behaves_as_or(self):
        rule = _rule("and", _cond("a", "equals", "1"), _cond("b", "equals", "2"))
        assert evaluate_rule(rule, {"a": "1"}) is True
