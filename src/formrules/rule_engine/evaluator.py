"""Decide whether a condition holds, and whether a rule fires, against form data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formrules.rule_engine.models import Condition, ConditionOperator, LogicOperator, Rule
from formrules.values import is_falsy, to_number, to_text


def _is_empty(value: Any) -> bool:
    return is_falsy(value) or value == "" or to_text(value).strip() == ""


def _is_not_empty(value: Any) -> bool:
    return not is_falsy(value) and value != "" and to_text(value).strip() != ""


def _loose_equals(field_value: Any, condition_value: Any) -> bool:
    # Checkboxes store booleans while authored values are strings: compare as text
    if isinstance(field_value, bool) or isinstance(condition_value, bool):
        return to_text(field_value) == to_text(condition_value)
    if type(field_value) is not type(condition_value) and not (
        isinstance(field_value, int | float) and isinstance(condition_value, int | float)
    ):
        return False
    return field_value == condition_value


def _contains(field_value: Any, condition_value: Any) -> bool:
    return to_text(condition_value).lower() in to_text(field_value).lower()


def evaluate_condition(condition: Condition, form_data: Mapping[str, Any]) -> bool:
    """Compare ``form_data[condition.field]`` against ``condition.value``.

    Unknown operators evaluate to False. Numeric comparisons against values that
    do not coerce to a number are False for both greater_than and less_than.
    """
    field_value = form_data.get(condition.field)
    condition_value = condition.value

    match condition.operator:
        case ConditionOperator.EQUALS:
            return _loose_equals(field_value, condition_value)
        case ConditionOperator.NOT_EQUALS:
            return not _loose_equals(field_value, condition_value)
        case ConditionOperator.IS_EMPTY:
            return _is_empty(field_value)
        case ConditionOperator.IS_NOT_EMPTY:
            return _is_not_empty(field_value)
        case ConditionOperator.CONTAINS:
            if is_falsy(field_value):
                return False
            return _contains(field_value, condition_value)
        case ConditionOperator.NOT_CONTAINS:
            if is_falsy(field_value):
                return True
            return not _contains(field_value, condition_value)
        case ConditionOperator.GREATER_THAN:
            return to_number(field_value) > to_number(condition_value)
        case ConditionOperator.LESS_THAN:
            return to_number(field_value) < to_number(condition_value)
        case _:
            return False


def _is_complete(condition: Condition) -> bool:
    return bool(condition.field) and bool(condition.operator)


def evaluate_rule(rule: Rule, form_data: Mapping[str, Any]) -> bool:
    """Combine a rule's conditions with its logic operator.

    A rule without conditions never fires. An incomplete condition (no field or
    no operator) fails an AND rule but is only skipped by an OR rule.
    """
    if not rule.conditions:
        return False

    if rule.logic_operator == LogicOperator.AND:
        return all(
            _is_complete(condition) and evaluate_condition(condition, form_data)
            for condition in rule.conditions
        )
    return any(
        _is_complete(condition) and evaluate_condition(condition, form_data)
        for condition in rule.conditions
    )
