"""Authoring-time checks for rule sets. Problems are returned, never raised."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from formrules.rule_engine.models import (
    EMPTINESS_OPERATORS,
    SUBMIT_ACTIONS,
    VALUE_ACTIONS,
    Action,
    Condition,
    Rule,
    RuleValidationError,
)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _condition_errors(
    rule_index: int, condition_index: int, condition: Condition
) -> list[RuleValidationError]:
    errors: list[RuleValidationError] = []

    def add(attribute: str, message: str) -> None:
        errors.append(
            RuleValidationError(
                rule_index=rule_index,
                condition_index=condition_index,
                field=attribute,
                message=message,
            )
        )

    if not condition.field:
        add("field", "Field is required")
    if not condition.operator:
        add("operator", "Operator is required")
    # A missing operator still needs a value: only the emptiness operators are exempt
    if condition.operator not in EMPTINESS_OPERATORS and _is_blank(condition.value):
        add("value", "Value is required for this operator")
    return errors


def _action_errors(rule_index: int, action_index: int, action: Action) -> list[RuleValidationError]:
    errors: list[RuleValidationError] = []

    def add(attribute: str, message: str) -> None:
        errors.append(
            RuleValidationError(
                rule_index=rule_index,
                action_index=action_index,
                field=attribute,
                message=message,
            )
        )

    if not action.type:
        add("type", "Action type is required")
    if action.type not in SUBMIT_ACTIONS and not action.field:
        add("field", "Field is required for this action")
    if action.type in VALUE_ACTIONS and _is_blank(action.value):
        add("value", "Value is required for this action")
    return errors


def validate_rules(rules: Sequence[Rule]) -> list[RuleValidationError]:
    """List every problem in ``rules``, ordered by rule, then conditions, then actions."""
    errors: list[RuleValidationError] = []
    for rule_index, rule in enumerate(rules):
        for condition_index, condition in enumerate(rule.conditions):
            errors.extend(_condition_errors(rule_index, condition_index, condition))
        for action_index, action in enumerate(rule.actions):
            errors.extend(_action_errors(rule_index, action_index, action))
    return errors
