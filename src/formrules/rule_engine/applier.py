"""Apply firing rules, in authoring order, to per-field and form-level state."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from formrules.rule_engine.evaluator import evaluate_rule
from formrules.rule_engine.models import (
    SUBMIT_ACTIONS,
    Action,
    ActionType,
    EvaluationResult,
    FieldState,
    FormState,
    Rule,
)

logger = logging.getLogger(__name__)

SUBMIT_TARGET = "submit"


def initial_field_states(
    field_ids: Iterable[str],
    required_fields: Mapping[str, bool],
) -> dict[str, FieldState]:
    """Seed states: visible, enabled, required taken from the field's own flag."""
    return {
        field_id: FieldState(required=bool(required_fields.get(field_id, False)))
        for field_id in field_ids
    }


def apply_rules_to_fields(
    rules: Sequence[Rule],
    form_data: Mapping[str, Any],
    field_ids: Sequence[str],
    initial_states: Mapping[str, FieldState],
) -> EvaluationResult:
    """Fold every firing rule's actions into fresh field and form state.

    Rules apply in list order, so a later rule overwrites an earlier one for the
    same field attribute. Fields named by the conditions of a firing rule that
    disables submit are tagged as causing it, accumulated across rules.
    Malformed actions are skipped, never raised.
    """
    known_ids = set(field_ids)
    field_states: dict[str, FieldState] = {}
    for field_id in field_ids:
        seed = initial_states.get(field_id)
        if seed is None:
            field_states[field_id] = FieldState()
        else:
            field_states[field_id] = seed.model_copy(update={"causes_submit_disabled": False})
    form_state = FormState()
    affected: dict[str, set[str]] = defaultdict(set)

    for index, rule in enumerate(rules):
        if not evaluate_rule(rule, form_data):
            continue
        logger.debug("Rule %d (%s) fired", index, rule.id or "unnamed")

        disable_action = next(
            (a for a in rule.actions if a.type == ActionType.DISABLE_SUBMIT), None
        )
        if disable_action is not None:
            _tag_submit_causes(rule, known_ids, field_states, form_state, disable_action)

        for action in rule.actions:
            if not action.type:
                continue
            if action.type in SUBMIT_ACTIONS:
                affected[action.type].add(SUBMIT_TARGET)
                _apply_submit_action(action, form_state)
                continue
            if not action.field:
                logger.debug("Skipping %s action without a target field", action.type)
                continue
            if action.field not in field_states:
                field_states[action.field] = FieldState()
            affected[action.type].add(action.field)
            _apply_field_action(action, field_states[action.field])

    if affected:
        logger.debug(
            "Actions exercised: %s",
            {action_type: sorted(ids) for action_type, ids in affected.items()},
        )
    return EvaluationResult(field_states=field_states, form_state=form_state)


def _tag_submit_causes(
    rule: Rule,
    known_ids: set[str],
    field_states: dict[str, FieldState],
    form_state: FormState,
    disable_action: Action,
) -> None:
    for condition in rule.conditions:
        field_id = condition.field
        if not field_id or field_id not in known_ids:
            continue
        state = field_states.get(field_id)
        if state is not None:
            state.causes_submit_disabled = True
            if disable_action.error_message:
                state.submit_disabled_message = disable_action.error_message
        if field_id not in form_state.submit_disabled_by_fields:
            form_state.submit_disabled_by_fields.append(field_id)


def _apply_submit_action(action: Action, form_state: FormState) -> None:
    if action.type == ActionType.DISABLE_SUBMIT:
        form_state.submit_disabled = True
        if action.error_message:
            form_state.submit_disabled_message = action.error_message
    else:
        form_state.submit_disabled = False
        form_state.submit_disabled_message = None


def _apply_field_action(action: Action, state: FieldState) -> None:
    match action.type:
        case ActionType.SHOW_FIELD:
            state.visible = True
        case ActionType.HIDE_FIELD:
            state.visible = False
        case ActionType.REQUIRE_FIELD:
            state.required = True
        case ActionType.OPTIONAL_FIELD:
            state.required = False
        case ActionType.SET_VALUE:
            if action.has_value:
                state.value = action.value
        case ActionType.SET_CONTENT:
            if action.has_value:
                state.content = action.value
        case ActionType.DISABLE_FIELD:
            state.disabled = True
        case ActionType.ENABLE_FIELD:
            state.disabled = False
        case ActionType.DISABLE_ADDRESS_FIELDS:
            state.address_fields_disabled = True
        case ActionType.ENABLE_ADDRESS_FIELDS:
            state.address_fields_disabled = False
        case _:
            logger.debug("Ignoring unknown action type %r", action.type)
