"""
Schema validator.

Each property is compiled into a pydantic ``TypeAdapter`` whose validator
chain mirrors the rule order, first failure wins:

1. Required-empty: a required property holding ``None`` or ``""``.
2. Type mismatch: a present value pydantic cannot read as the declared
   type. Numeric strings such as ``"12"`` are accepted for number and
   integer properties, since text inputs deliver them that way.
3. Closed choice: a present value outside ``enum`` / ``oneOf``.

Empty optional values skip rules 2 and 3.
"""

import logging
from collections.abc import Mapping
from typing import Annotated, Any, Callable, Optional

from pydantic import (
    AfterValidator,
    BeforeValidator,
    FiniteFloat,
    StrictBool,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

from trade_forms.models.data_schema import DataSchema, PropertySchema

logger = logging.getLogger("trade-forms.validator")

REQUIRED_MESSAGE = "This field is required"
NOT_ALLOWED_MESSAGE = "Not an allowed value"

_INVALID_TYPE_MESSAGES = {
    "string": "Invalid type: expected text",
    "number": "Invalid type: expected a number",
    "integer": "Invalid type: expected a whole number",
    "boolean": "Invalid type: expected true or false",
}

_BASE_TYPES: dict[str, Any] = {
    "string": str,
    "number": FiniteFloat,
    "integer": int,
    "boolean": StrictBool,
}


def is_empty(value: Any) -> bool:
    """``None`` and the empty string count as no value."""
    return value is None or (isinstance(value, str) and value == "")


def invalid_type_message(property_type: str) -> str:
    return _INVALID_TYPE_MESSAGES.get(property_type, "Invalid type")


def _check_empty(required: bool) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        if is_empty(value):
            if required:
                raise PydanticCustomError("required", REQUIRED_MESSAGE)
            return None
        return value

    return check


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise PydanticCustomError("bool_not_numeric", "Boolean given for a numeric property")
    return value


def _check_choice(allowed: list[Any]) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        if value is not None and value not in allowed:
            raise PydanticCustomError("not_allowed", NOT_ALLOWED_MESSAGE)
        return value

    return check


class PropertyRule:
    """Compiled validation rule for one property."""

    def __init__(self, prop: PropertySchema, required: bool):
        self.property = prop
        self.required = required

        validators: list[Any] = [BeforeValidator(_check_empty(required))]
        if prop.is_numeric:
            validators.append(BeforeValidator(_reject_bool))
        if prop.is_closed_choice:
            validators.append(AfterValidator(_check_choice(prop.allowed_values)))

        base = _BASE_TYPES.get(prop.type, str)
        self._adapter: TypeAdapter[Any] = TypeAdapter(
            Annotated[(Optional[base], *validators)]
        )

    def check(self, value: Any) -> str | None:
        """Return the first failing rule's message, or None when valid."""
        try:
            self._adapter.validate_python(value)
        except ValidationError as e:
            return self._message_for(e.errors()[0]["type"])
        return None

    def _message_for(self, error_type: str) -> str:
        if error_type == "required":
            return REQUIRED_MESSAGE
        if error_type == "not_allowed":
            return NOT_ALLOWED_MESSAGE
        return invalid_type_message(self.property.type)


def compile_property(prop: PropertySchema, required: bool) -> PropertyRule:
    """Compile the rule for a property. Allowed values are used as given."""
    return PropertyRule(prop, required)


def validate_property(prop: PropertySchema, value: Any, is_required: bool) -> str | None:
    """
    Validate one value against its property schema.

    Returns:
        An error message, or None when the value satisfies every rule.
    """
    return compile_property(prop, is_required).check(value)


class FormValidator:
    """
    Validation rule set compiled from a whole data schema.

    Validation is schema driven: every declared property is checked,
    whether or not the current layout renders a control for it.
    """

    def __init__(self, schema: DataSchema):
        self.schema = schema
        self._rules = {
            name: compile_property(prop, schema.is_required(name))
            for name, prop in schema.properties.items()
        }

    def validate_property(self, name: str, value: Any) -> str | None:
        rule = self._rules.get(name)
        if rule is None:
            return None
        error = rule.check(value)
        logger.debug("Validated %s: %s", name, error or "ok")
        return error

    def validate_all(self, values: Mapping[str, Any]) -> dict[str, str]:
        """Messages for every failing property; valid ones are absent."""
        errors: dict[str, str] = {}
        for name, rule in self._rules.items():
            error = rule.check(values.get(name))
            if error is not None:
                errors[name] = error
        return errors

    def is_valid(self, values: Mapping[str, Any]) -> bool:
        return all(rule.check(values.get(name)) is None for name, rule in self._rules.items())


def validate_all(schema: DataSchema, values: Mapping[str, Any]) -> dict[str, str]:
    """Validate a full value map against a schema."""
    return FormValidator(schema).validate_all(values)
