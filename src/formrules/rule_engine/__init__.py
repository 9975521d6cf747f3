"""Rule engine: condition evaluation, rule application and rule validation."""

from formrules.rule_engine.applier import apply_rules_to_fields, initial_field_states
from formrules.rule_engine.evaluator import evaluate_condition, evaluate_rule
from formrules.rule_engine.models import (
    Action,
    ActionType,
    Condition,
    ConditionOperator,
    EvaluationResult,
    FieldState,
    FormState,
    LogicOperator,
    Rule,
    RuleValidationError,
)
from formrules.rule_engine.validator import validate_rules

__all__ = [
    "Action",
    "ActionType",
    "Condition",
    "ConditionOperator",
    "EvaluationResult",
    "FieldState",
    "FormState",
    "LogicOperator",
    "Rule",
    "RuleValidationError",
    "apply_rules_to_fields",
    "evaluate_condition",
    "evaluate_rule",
    "initial_field_states",
    "validate_rules",
]
