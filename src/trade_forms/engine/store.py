"""
Form state store.

Owns the values, errors, touched flags and submission flag of one form
instance. All mutation goes through the methods below; every write
notifies subscribers with the affected property name (``None`` for
whole-form changes) so hosts can re-render the bound widgets.

Whole-form validity is recomputed on every value write and on reset.
That is one rule check per declared property, which is fine for the
form sizes declaration screens use.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable

from trade_forms.engine.validator import FormValidator
from trade_forms.models.data_schema import DataSchema
from trade_forms.models.form_state import FormState

logger = logging.getLogger("trade-forms.store")

Listener = Callable[[str | None], None]


def get_initial_values(
    schema: DataSchema,
    data: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Seed one value per declared property.

    Priority: supplied data, then the schema default, then an empty value
    for the type (``False`` for booleans, ``None`` for numbers, ``""``
    otherwise). Keys in ``data`` that the schema does not declare are
    dropped.
    """
    values: dict[str, Any] = {}
    for name, prop in schema.properties.items():
        if data is not None and name in data:
            values[name] = copy.deepcopy(data[name])
        elif prop.default is not None:
            values[name] = copy.deepcopy(prop.default)
        elif prop.type == "boolean":
            values[name] = False
        elif prop.is_numeric:
            values[name] = None
        else:
            values[name] = ""
    return values


class FormStore:
    """
    Mutable state of a single mounted form.

    Usage:
        store = FormStore(schema, initial_data={"qty": "12"})
        store.set_value("qty", "15")
        store.set_touched("qty")
        if store.validate_form():
            ...
    """

    def __init__(
        self,
        schema: DataSchema,
        initial_data: Mapping[str, Any] | None = None,
        validator: FormValidator | None = None,
    ):
        self.schema = schema
        self.validator = validator or FormValidator(schema)
        self._initial_values = get_initial_values(schema, initial_data)
        self._values = copy.deepcopy(self._initial_values)
        self._errors: dict[str, str] = {}
        self._touched: dict[str, bool] = {}
        self._is_submitting = False
        self._is_valid = self.validator.is_valid(self._values)
        self._listeners: list[Listener] = []

    # Queries

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def touched(self) -> dict[str, bool]:
        return dict(self._touched)

    @property
    def initial_values(self) -> dict[str, Any]:
        return copy.deepcopy(self._initial_values)

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    def get_value(self, name: str) -> Any:
        return self._values.get(name)

    def get_error(self, name: str) -> str | None:
        return self._errors.get(name)

    def is_touched(self, name: str) -> bool:
        return self._touched.get(name, False)

    def snapshot(self) -> FormState:
        return FormState(
            values=copy.deepcopy(self._values),
            errors=dict(self._errors),
            touched=dict(self._touched),
            is_submitting=self._is_submitting,
            is_valid=self._is_valid,
        )

    # Mutations

    def set_value(self, name: str, value: Any) -> None:
        """Write a value, then re-validate that property only."""
        if name not in self.schema.properties:
            logger.warning("Ignoring value for undeclared property %r", name)
            return

        self._values[name] = value
        self._store_error(name, self.validator.validate_property(name, value))
        self._is_valid = self.validator.is_valid(self._values)
        self._notify(name)

    def set_touched(self, name: str) -> None:
        if self._touched.get(name):
            return
        self._touched[name] = True
        self._notify(name)

    def validate_field(self, name: str) -> str | None:
        """Re-validate the current value of one property."""
        if name not in self.schema.properties:
            return None
        error = self.validator.validate_property(name, self._values.get(name))
        self._store_error(name, error)
        self._notify(name)
        return error

    def validate_form(self) -> bool:
        """
        Validate every declared property.

        Replaces the error map and marks every property touched so that
        errors on fields the user never visited become visible.
        """
        self._errors = self.validator.validate_all(self._values)
        self._touched = {name: True for name in self.schema.properties}
        self._notify(None)
        return not self._errors

    def reset(self) -> None:
        """Restore the initial values and clear errors and touched flags."""
        self._values = copy.deepcopy(self._initial_values)
        self._errors = {}
        self._touched = {}
        self._is_valid = self.validator.is_valid(self._values)
        self._notify(None)

    def set_submitting(self, flag: bool) -> None:
        if self._is_submitting == flag:
            return
        self._is_submitting = flag
        self._notify(None)

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _store_error(self, name: str, error: str | None) -> None:
        if error is None:
            self._errors.pop(name, None)
        else:
            self._errors[name] = error

    def _notify(self, name: str | None) -> None:
        for listener in list(self._listeners):
            listener(name)
