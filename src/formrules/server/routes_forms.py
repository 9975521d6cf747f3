"""Form routes: evaluate rules, validate rule sets, validate submissions."""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field, ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from formrules.forms.evaluation import evaluate_form
from formrules.forms.models import FieldDescriptor
from formrules.forms.submission import validate_submission
from formrules.rule_engine.models import CamelModel, Rule
from formrules.rule_engine.validator import validate_rules


class EvaluateRequest(CamelModel):
    fields: list[FieldDescriptor] = Field(default_factory=list)
    rules: list[Rule] = Field(default_factory=list)
    form_data: dict[str, Any] = Field(default_factory=dict)


class ValidateRulesRequest(CamelModel):
    rules: list[Rule] = Field(default_factory=list)


def _invalid(e: Exception) -> JSONResponse:
    if isinstance(e, ValidationError):
        detail = e.errors(include_url=False, include_context=False, include_input=False)
        return JSONResponse({"error": "Invalid request body", "detail": detail}, status_code=422)
    return JSONResponse({"error": "Request body must be valid JSON"}, status_code=422)


async def evaluate(request: Request) -> JSONResponse:
    """POST /api/forms/evaluate — compute field states and the submit gate."""
    try:
        body = await request.json()
        req = EvaluateRequest.model_validate(body)
    except (json.JSONDecodeError, ValueError) as e:
        return _invalid(e)

    result = evaluate_form(req.fields, req.rules, req.form_data)
    return JSONResponse(result.to_json_dict())


async def validate_rule_set(request: Request) -> JSONResponse:
    """POST /api/rules/validate — list authoring problems in a rule set."""
    try:
        body = await request.json()
        req = ValidateRulesRequest.model_validate(body)
    except (json.JSONDecodeError, ValueError) as e:
        return _invalid(e)

    errors = validate_rules(req.rules)
    return JSONResponse(
        {
            "valid": len(errors) == 0,
            "errorCount": len(errors),
            "errors": [e.to_json_dict() for e in errors],
        }
    )


async def submission(request: Request) -> JSONResponse:
    """POST /api/forms/validate-submission — field errors plus the submit decision."""
    try:
        body = await request.json()
        req = EvaluateRequest.model_validate(body)
    except (json.JSONDecodeError, ValueError) as e:
        return _invalid(e)

    result = validate_submission(req.fields, req.rules, req.form_data)
    evaluation = result.evaluation.to_json_dict()
    return JSONResponse(
        {
            "canSubmit": result.can_submit,
            "errors": result.errors,
            "fieldStates": evaluation["fieldStates"],
            "formState": evaluation["formState"],
        }
    )


routes = [
    Route("/api/forms/evaluate", evaluate, methods=["POST"]),
    Route("/api/forms/validate-submission", submission, methods=["POST"]),
    Route("/api/rules/validate", validate_rule_set, methods=["POST"]),
]
