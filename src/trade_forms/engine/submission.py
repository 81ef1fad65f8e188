"""
Submission pipeline.

    Idle -> Validating -> Invalid -> Idle
                       -> Valid -> Submitting -> Idle

A submit validates the whole form, coerces numeric strings, awaits the
host's submit handler and always clears the in-flight flag afterwards.
Handler failures propagate to the caller.
"""

import inspect
import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Awaitable, Callable, Protocol

from trade_forms.config import get_config
from trade_forms.engine.store import FormStore
from trade_forms.models.data_schema import DataSchema

logger = logging.getLogger("trade-forms.submission")

SubmitHandler = Callable[[dict[str, Any]], Awaitable[None] | None]


class SubmitEvent(Protocol):
    def prevent_default(self) -> None: ...


class SubmissionPhase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


class SubmissionInProgressError(RuntimeError):
    """Raised when a submit starts while another one is still in flight."""


def parse_number(text: str, integer: bool = False) -> float | int | None:
    """
    Parse a numeric string, or return None when it is not a finite number.

    Integral results for integer properties come back as ``int``. Plain
    digit strings are read exactly, whatever their size.
    """
    text = text.strip()
    if integer:
        try:
            return int(text)
        except ValueError:
            pass
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if integer and number.is_integer():
        return int(number)
    return number


def coerce_values(schema: DataSchema, values: Mapping[str, Any]) -> dict[str, Any]:
    """
    Convert numeric strings to numbers for number and integer properties.

    Strings that do not parse are left as they are; validation has
    already had its say by the time this runs.
    """
    coerced = dict(values)
    for name, prop in schema.properties.items():
        value = coerced.get(name)
        if not prop.is_numeric or not isinstance(value, str):
            continue
        number = parse_number(value, integer=prop.type == "integer")
        if number is None:
            if value != "":
                logger.warning("Leaving unparseable numeric value for %r as text", name)
            continue
        coerced[name] = number
    return coerced


class SubmissionPipeline:
    """
    Runs the submit sequence for one form store.

    Args:
        store: The form's state store.
        on_submit: Host callback receiving the coerced values. May be a
            coroutine function.
        reject_concurrent: Raise SubmissionInProgressError when a submit
            arrives while one is in flight. Defaults to the configured
            ``reject_concurrent_submit``.
    """

    def __init__(
        self,
        store: FormStore,
        on_submit: SubmitHandler,
        reject_concurrent: bool | None = None,
    ):
        self.store = store
        self.on_submit = on_submit
        if reject_concurrent is None:
            reject_concurrent = get_config().reject_concurrent_submit
        self.reject_concurrent = reject_concurrent
        self._phase = SubmissionPhase.IDLE

    @property
    def phase(self) -> SubmissionPhase:
        return self._phase

    async def handle_submit(self, event: SubmitEvent | None = None) -> bool:
        """
        Validate, coerce and submit.

        Args:
            event: Optional host event; its ``prevent_default`` is called
                first when present.

        Returns:
            True when the submit handler ran, False when validation
            stopped the submission.

        Raises:
            SubmissionInProgressError: If another submission is in flight
                and overlapping submits are rejected.
        """
        if event is not None:
            event.prevent_default()

        if self.store.is_submitting and self.reject_concurrent:
            logger.warning("Rejecting submit: a submission is already in flight")
            raise SubmissionInProgressError("A submission is already in progress")

        self._phase = SubmissionPhase.VALIDATING
        if not self.store.validate_form():
            logger.debug("Submit blocked by %d validation error(s)", len(self.store.errors))
            self._phase = SubmissionPhase.IDLE
            return False

        self.store.set_submitting(True)
        self._phase = SubmissionPhase.SUBMITTING
        try:
            values = coerce_values(self.store.schema, self.store.values)
            logger.info("Submitting form with %d value(s)", len(values))
            result = self.on_submit(values)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.error("Submit handler failed", exc_info=True)
            raise
        finally:
            self.store.set_submitting(False)
            self._phase = SubmissionPhase.IDLE

        logger.info("Form submitted")
        return True
