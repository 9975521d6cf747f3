"""Tests for rule_engine/models.py — Pydantic models and enums."""

from __future__ import annotations

from enum import StrEnum

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
)


class TestEnums:
    def test_operator_values(self):
        assert len(ConditionOperator) == 8
        assert ConditionOperator.NOT_EQUALS == "not_equals"
        assert issubclass(ConditionOperator, StrEnum)

    def test_action_type_values(self):
        assert len(ActionType) == 12
        assert ActionType.DISABLE_ADDRESS_FIELDS == "disableAddressFields"

    def test_logic_operator_values(self):
        assert {str(op) for op in LogicOperator} == {"AND", "OR"}


class TestRuleModel:
    def test_parses_authored_camel_case(self):
        rule = Rule.model_validate(
            {
                "id": "r1",
                "logicOperator": "OR",
                "conditions": [{"id": "c1", "field": "consent", "operator": "equals", "value": True}],
                "actions": [{"id": "a1", "type": "disableSubmit", "field": "", "errorMessage": "No"}],
            }
        )
        assert rule.logic_operator == "OR"
        assert rule.conditions[0].value is True
        assert rule.actions[0].error_message == "No"

    def test_accepts_snake_case(self):
        rule = Rule(logic_operator="OR")
        assert rule.logic_operator == "OR"

    def test_defaults_tolerate_incomplete_rules(self):
        rule = Rule.model_validate({"conditions": [{}], "actions": [{}]})
        assert rule.logic_operator == "AND"
        assert rule.conditions[0].field == ""
        assert rule.conditions[0].operator == ""
        assert rule.actions[0].type == ""

    def test_unknown_operator_is_kept(self):
        condition = Condition.model_validate({"field": "a", "operator": "matches"})
        assert condition.operator == "matches"

    def test_string_value_is_not_coerced_to_bool(self):
        assert Condition(value="true").value == "true"

    def test_dump_round_trips_through_json(self):
        rule = Rule.model_validate(
            {
                "logicOperator": "AND",
                "conditions": [{"field": "a", "operator": "equals", "value": "1"}],
                "actions": [{"type": "hideField", "field": "b"}],
            }
        )
        dumped = rule.to_json_dict()
        assert Rule.model_validate(dumped).to_json_dict() == dumped


class TestActionValue:
    def test_absent_value_is_unset(self):
        assert Action(type="setValue", field="x").has_value is False

    def test_empty_string_is_set(self):
        assert Action(type="setValue", field="x", value="").has_value is True

    def test_explicit_null_is_set(self):
        action = Action.model_validate({"type": "setValue", "field": "x", "value": None})
        assert action.has_value is True


class TestStateModels:
    def test_field_state_defaults(self):
        state = FieldState()
        assert state.visible is True
        assert state.required is False
        assert state.disabled is False
        assert state.value is None
        assert state.content is None
        assert state.causes_submit_disabled is False
        assert state.address_fields_disabled is False

    def test_form_state_defaults(self):
        state = FormState()
        assert state.submit_disabled is False
        assert state.submit_disabled_by_fields == []

    def test_evaluation_result_serialises_camel_case(self):
        result = EvaluationResult(
            field_states={"a": FieldState(causes_submit_disabled=True)},
            form_state=FormState(submit_disabled=True, submit_disabled_by_fields=["a"]),
        )
        data = result.to_json_dict()
        assert data["fieldStates"]["a"]["causesSubmitDisabled"] is True
        assert data["formState"]["submitDisabled"] is True
        assert data["formState"]["submitDisabledByFields"] == ["a"]
