"""
Form engine.

This module contains the stateful core:
- Schema resolution and widget classification (pure functions)
- Validation compiled from the data schema
- The form state store
- The submission pipeline
"""

from trade_forms.engine.resolver import resolve_control, scope_to_property_name
from trade_forms.engine.classifier import WidgetKind, classify
from trade_forms.engine.validator import (
    NOT_ALLOWED_MESSAGE,
    REQUIRED_MESSAGE,
    FormValidator,
    compile_property,
    invalid_type_message,
    is_empty,
    validate_all,
    validate_property,
)
from trade_forms.engine.store import FormStore, get_initial_values
from trade_forms.engine.submission import (
    SubmissionInProgressError,
    SubmissionPhase,
    SubmissionPipeline,
    coerce_values,
    parse_number,
)

__all__ = [
    "resolve_control",
    "scope_to_property_name",
    "WidgetKind",
    "classify",
    "NOT_ALLOWED_MESSAGE",
    "REQUIRED_MESSAGE",
    "FormValidator",
    "compile_property",
    "invalid_type_message",
    "is_empty",
    "validate_all",
    "validate_property",
    "FormStore",
    "get_initial_values",
    "SubmissionInProgressError",
    "SubmissionPhase",
    "SubmissionPipeline",
    "coerce_values",
    "parse_number",
]
