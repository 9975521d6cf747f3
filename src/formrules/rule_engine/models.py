"""Pydantic models and enums for the conditional form-logic engine."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConditionOperator(StrEnum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


class ActionType(StrEnum):
    SHOW_FIELD = "showField"
    HIDE_FIELD = "hideField"
    REQUIRE_FIELD = "requireField"
    OPTIONAL_FIELD = "optionalField"
    SET_VALUE = "setValue"
    DISABLE_FIELD = "disableField"
    ENABLE_FIELD = "enableField"
    SET_CONTENT = "setContent"
    DISABLE_SUBMIT = "disableSubmit"
    ENABLE_SUBMIT = "enableSubmit"
    DISABLE_ADDRESS_FIELDS = "disableAddressFields"
    ENABLE_ADDRESS_FIELDS = "enableAddressFields"


class LogicOperator(StrEnum):
    AND = "AND"
    OR = "OR"


# Operators that never compare against a value
EMPTINESS_OPERATORS = frozenset({ConditionOperator.IS_EMPTY.value, ConditionOperator.IS_NOT_EMPTY.value})

# Actions that act on the form's submit gate rather than a field
SUBMIT_ACTIONS = frozenset({ActionType.DISABLE_SUBMIT.value, ActionType.ENABLE_SUBMIT.value})

# Actions that carry a value payload
VALUE_ACTIONS = frozenset({ActionType.SET_VALUE.value, ActionType.SET_CONTENT.value})


class CamelModel(BaseModel):
    """Accepts camelCase (as authored) or snake_case keys; dumps camelCase with by_alias."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Condition(CamelModel):
    # field/operator stay plain strings: rules mid-edit may hold "" or unknown values
    id: str = ""
    field: str = ""
    operator: str = ""
    value: str | bool | int | float | None = None


class Action(CamelModel):
    id: str = ""
    type: str = ""
    field: str = ""
    value: Any = None
    error_message: str | None = None

    @property
    def has_value(self) -> bool:
        """True when a value key was supplied, even an explicit empty string or null."""
        return "value" in self.model_fields_set


class Rule(CamelModel):
    id: str = ""
    conditions: list[Condition] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)
    logic_operator: str = LogicOperator.AND


class FieldState(CamelModel):
    visible: bool = True
    required: bool = False
    disabled: bool = False
    value: Any = None
    content: Any = None
    causes_submit_disabled: bool = False
    address_fields_disabled: bool = False
    submit_disabled_message: str | None = None


class FormState(CamelModel):
    submit_disabled: bool = False
    submit_disabled_by_fields: list[str] = Field(default_factory=list)
    submit_disabled_message: str | None = None


class EvaluationResult(CamelModel):
    field_states: dict[str, FieldState] = Field(default_factory=dict)
    form_state: FormState = Field(default_factory=FormState)


class RuleValidationError(CamelModel):
    """A problem found in an authored rule set."""

    rule_index: int
    condition_index: int | None = None
    action_index: int | None = None
    field: str
    message: str
