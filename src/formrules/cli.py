"""CLI entry point for formrules."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, cast

from pydantic import ValidationError

from formrules import __version__
from formrules.config import load_config
from formrules.forms.evaluation import evaluate_form
from formrules.forms.models import Campaign
from formrules.forms.submission import validate_submission
from formrules.rule_engine.validator import validate_rules
from formrules.server.runner import run_server


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _read_json(path: Path) -> Any:
    if not path.exists():
        _fail(f"file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        _fail(f"{path} is not valid JSON: {e}")


def _load_campaign(path: Path) -> Campaign:
    data = _read_json(path)
    try:
        return Campaign.model_validate(data)
    except ValidationError as e:
        _fail(f"{path} is not a valid campaign: {e.error_count()} problem(s)\n{e}")


def _load_form_data(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    data = _read_json(path)
    if not isinstance(data, dict):
        _fail(f"{path} must contain a JSON object of field values")
    return cast(dict[str, Any], data)


def _cmd_evaluate(args: argparse.Namespace) -> None:
    campaign = _load_campaign(cast(Path, args.campaign))
    form_data = _load_form_data(cast(Path | None, args.data))
    result = evaluate_form(campaign.form_fields, campaign.conditional_rules, form_data)
    print(json.dumps(result.to_json_dict(), indent=2))


def _cmd_validate(args: argparse.Namespace) -> None:
    campaign = _load_campaign(cast(Path, args.campaign))
    errors = validate_rules(campaign.conditional_rules)
    rule_count = len(campaign.conditional_rules)

    if not errors:
        print(f"OK: {rule_count} rule(s), no problems found")
        return

    print(f"{len(errors)} problem(s) in {rule_count} rule(s):")
    for error in errors:
        where = f"rule {error.rule_index + 1}"
        if error.condition_index is not None:
            where += f", condition {error.condition_index + 1}"
        if error.action_index is not None:
            where += f", action {error.action_index + 1}"
        print(f"  {where} [{error.field}]: {error.message}")
    sys.exit(1)


def _cmd_check(args: argparse.Namespace) -> None:
    campaign = _load_campaign(cast(Path, args.campaign))
    form_data = _load_form_data(cast(Path | None, args.data))
    result = validate_submission(campaign.form_fields, campaign.conditional_rules, form_data)
    form_state = result.evaluation.form_state

    if result.can_submit:
        print("Submission OK")
        return

    print("Submission blocked")
    for field_id, message in result.errors.items():
        print(f"  {field_id}: {message}")
    if form_state.submit_disabled:
        message = form_state.submit_disabled_message or "Form can't be submitted"
        caused_by = ", ".join(form_state.submit_disabled_by_fields) or "rules"
        print(f"  submit disabled by {caused_by}: {message}")
    sys.exit(1)


def _cmd_serve(args: argparse.Namespace) -> None:
    config = load_config()
    if args.host:
        config.host = cast(str, args.host)
    if args.port:
        config.port = cast(int, args.port)
    run_server(config)


def _configure_logging(level: str | None) -> None:
    name = (level or load_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="formrules",
        description="Conditional form-logic engine for campaign forms",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"formrules {__version__}"
    )
    _ = parser.add_argument(
        "--log-level",
        default=None,
        dest="log_level",
        help="Logging level (default: from config, WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # evaluate subcommand
    evaluate_p = subparsers.add_parser("evaluate", help="Compute field states for form data")
    _ = evaluate_p.add_argument("campaign", type=Path, help="Campaign JSON file")
    _ = evaluate_p.add_argument(
        "--data", type=Path, default=None, help="JSON file with form field values"
    )

    # validate subcommand
    validate_p = subparsers.add_parser("validate", help="Check a campaign's rules for problems")
    _ = validate_p.add_argument("campaign", type=Path, help="Campaign JSON file")

    # check subcommand
    check_p = subparsers.add_parser("check", help="Validate a form submission")
    _ = check_p.add_argument("campaign", type=Path, help="Campaign JSON file")
    _ = check_p.add_argument(
        "--data", type=Path, default=None, help="JSON file with form field values"
    )

    # serve subcommand
    serve_p = subparsers.add_parser("serve", help="Start the HTTP API server")
    _ = serve_p.add_argument("--host", default=None, help="Bind address")
    _ = serve_p.add_argument("--port", type=int, default=None, help="Port")

    args = parser.parse_args()
    _configure_logging(cast(str | None, args.log_level))

    dispatch = {
        "evaluate": _cmd_evaluate,
        "validate": _cmd_validate,
        "check": _cmd_check,
        "serve": _cmd_serve,
    }
    command = cast(str | None, args.command)
    handler = dispatch.get(command) if command is not None else None
    if handler:
        handler(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
