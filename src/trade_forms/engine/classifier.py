"""
Field-type classifier.

Picks the widget kind for a resolved control. Rules are checked in a
fixed order and the first match wins:

1. ``options.format`` is used verbatim.
2. ``options.multi`` or ``options.rows > 1`` gives a textarea.
3. ``enum`` / ``oneOf`` gives a select.
4. Otherwise the property type decides.

A boolean control with ``multi`` therefore renders as a textarea.
"""

from enum import Enum

from trade_forms.models.resolved_control import ResolvedControl


class WidgetKind(str, Enum):
    """Built-in widget kinds. Format overrides may yield other strings."""

    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"

    def __str__(self) -> str:
        return self.value


def classify(resolved: ResolvedControl) -> str:
    """Return the widget kind for a resolved control."""
    prop = resolved.property
    options = resolved.options

    if options is not None and options.format:
        return options.format

    if options is not None and (options.multi or (options.rows is not None and options.rows > 1)):
        return WidgetKind.TEXTAREA.value

    if prop.is_closed_choice:
        return WidgetKind.SELECT.value

    match prop.type:
        case "boolean":
            return WidgetKind.CHECKBOX.value
        case "number" | "integer":
            return WidgetKind.NUMBER.value
        case "string" if prop.format == "email":
            return WidgetKind.EMAIL.value
        case _:
            return WidgetKind.TEXT.value
