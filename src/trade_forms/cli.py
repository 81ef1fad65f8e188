"""
Trade forms command line.

Usage:
    # Render a form definition to HTML
    python -m trade_forms render declaration.json

    # Render pre-filled, with every validation error visible
    python -m trade_forms render declaration.json --data draft.json --touch-all

    # Validate (and coerce) a data file against a definition
    python -m trade_forms validate declaration.json submission.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from trade_forms.config import get_config
from trade_forms.engine.submission import coerce_values
from trade_forms.form import JsonForm
from trade_forms.models.form_definition import FormDefinitionError, load_form_definition

logger = logging.getLogger("trade-forms.cli")


def _load_data(path: str | None) -> dict[str, Any] | None:
    if path is None:
        return None
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise FormDefinitionError(f"Could not read data file {path}: {e}") from e
    if not isinstance(data, dict):
        raise FormDefinitionError(f"Data file {path} must contain a JSON object")
    return data


def cmd_render(args: argparse.Namespace) -> int:
    definition = load_form_definition(args.definition)
    data = _load_data(args.data)
    form = JsonForm.from_definition(definition, **({"data": data} if data is not None else {}))
    if args.touch_all:
        form.validate_form()
    print(form.to_html())
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    config = get_config()
    definition = load_form_definition(args.definition)
    form = JsonForm.from_definition(definition, data=_load_data(args.data))

    is_valid = form.validate_form()
    values = coerce_values(form.schema, form.values) if is_valid else form.values
    result = {
        "is_valid": is_valid,
        "errors": form.errors,
        "values": values,
    }
    print(json.dumps(result, indent=config.indent_json_output, default=str))
    return 0 if is_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trade-forms",
        description="Render and validate schema-driven declaration forms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  TRADE_FORMS_LOG_LEVEL                 Logging level (default: WARNING)
  TRADE_FORMS_SUBMIT_LABEL              Submit button text (default: Submit)
  TRADE_FORMS_DRAFT_LABEL               Draft button text (default: Save Draft)
  TRADE_FORMS_REJECT_CONCURRENT_SUBMIT  Reject overlapping submits (default: true)
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a form definition to HTML")
    render_parser.add_argument("definition", help="Form definition JSON file")
    render_parser.add_argument("--data", help="JSON file with initial values")
    render_parser.add_argument(
        "--touch-all",
        action="store_true",
        help="Validate the whole form so every error is shown",
    )
    render_parser.set_defaults(handler=cmd_render)

    validate_parser = subparsers.add_parser("validate", help="Validate data against a form")
    validate_parser.add_argument("definition", help="Form definition JSON file")
    validate_parser.add_argument("data", help="JSON file with the values to validate")
    validate_parser.set_defaults(handler=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = get_config()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))

    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except FormDefinitionError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
