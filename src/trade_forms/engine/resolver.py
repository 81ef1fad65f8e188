"""
Schema resolver.

Matches a layout control to the data property named by its scope and
derives the display metadata the widgets need.
"""

import logging
import re

from trade_forms.models.data_schema import DataSchema
from trade_forms.models.layout import Control
from trade_forms.models.resolved_control import ResolvedControl

logger = logging.getLogger("trade-forms.resolver")

_SCOPE_PATTERN = re.compile(r"#/properties/(.+)")


def scope_to_property_name(scope: str) -> str:
    """
    Extract the property name from a scope reference.

    The name is everything after ``#/properties/``, with JSON Pointer
    escapes undone: ``#/properties/consignee`` gives ``consignee``. A
    scope not in that form is taken verbatim as the name.
    """
    match = _SCOPE_PATTERN.search(scope)
    if match is None:
        return scope
    return match.group(1).replace("~1", "/").replace("~0", "~")


def resolve_label(control: Control, name: str, title: str | None) -> str:
    if control.label is False:
        return ""
    if isinstance(control.label, str):
        return control.label
    return title if title is not None else name


def resolve_control(control: Control, schema: DataSchema) -> ResolvedControl | None:
    """
    Resolve a control against a data schema.

    Returns:
        The resolved control, or None when the scope names a property the
        schema does not declare. Callers skip such controls.
    """
    name = scope_to_property_name(control.scope)
    prop = schema.properties.get(name)
    if prop is None:
        logger.debug("Skipping control with unresolvable scope %r", control.scope)
        return None

    return ResolvedControl(
        name=name,
        label=resolve_label(control, name, prop.title),
        property=prop,
        required=schema.is_required(name),
        options=control.options,
    )
