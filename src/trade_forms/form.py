"""
Host-facing form.

``JsonForm`` wires one form store, the layout walker, the submission
pipeline and the optional draft callback together. It is the main entry
point for declaration screens: give it a data schema and a layout, call
``render()`` after every change, and ``submit()`` when the user submits.
"""

import copy
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable

from trade_forms.config import get_config
from trade_forms.engine.store import FormStore, Listener
from trade_forms.engine.submission import SubmissionPipeline, SubmitEvent, SubmitHandler
from trade_forms.models.data_schema import DataSchema
from trade_forms.models.form_definition import FormDefinition
from trade_forms.models.form_state import FormState
from trade_forms.models.layout import LayoutNode, default_layout, parse_layout
from trade_forms.rendering.html import to_html
from trade_forms.rendering.nodes import Button, FormView, Heading
from trade_forms.rendering.walker import render
from trade_forms.rendering.widgets import WidgetRegistry, default_registry

logger = logging.getLogger("trade-forms.form")

DraftHandler = Callable[[dict[str, Any]], Awaitable[None] | None]


class JsonForm:
    """
    A mounted form instance.

    Usage:
        form = JsonForm(
            schema={"properties": {"qty": {"type": "number"}}, "required": ["qty"]},
            layout={"type": "Control", "scope": "#/properties/qty"},
            on_submit=save_declaration,
        )

        view = form.render()
        view.find_widget("qty").change("12")

        submitted = await form.submit()
    """

    def __init__(
        self,
        schema: DataSchema | dict[str, Any],
        layout: LayoutNode | dict[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        on_submit: SubmitHandler | None = None,
        on_save_draft: DraftHandler | None = None,
        registry: WidgetRegistry | None = None,
        submit_label: str | None = None,
        draft_label: str | None = None,
        show_draft_button: bool = False,
        reject_concurrent_submit: bool | None = None,
        title: str | None = None,
    ):
        """
        Initialize the form.

        Args:
            schema: Data schema, as a model or a JSON Schema dict.
            layout: Layout node or UI schema dict. When None, one control
                per property is laid out vertically.
            data: Initial values; take priority over schema defaults.
            on_submit: Called with the coerced values after a successful
                validation. May be a coroutine function.
            on_save_draft: Called with the raw values on ``save_draft()``.
            registry: Widget registry; defaults to the built-in widgets.
            submit_label: Submit button text. Defaults to config.
            draft_label: Draft button text. Defaults to config.
            show_draft_button: Whether to render the draft button.
            reject_concurrent_submit: Reject a submit while one is in
                flight. Defaults to config.
            title: Heading text. Defaults to the schema title.
        """
        config = get_config()

        self.schema = schema if isinstance(schema, DataSchema) else DataSchema.model_validate(schema)
        if layout is None:
            self.layout = default_layout(list(self.schema.properties))
        else:
            self.layout = parse_layout(layout)

        self.registry = registry or default_registry()
        self.on_save_draft = on_save_draft
        self.submit_label = submit_label or config.submit_label
        self.submitting_label = config.submitting_label
        self.draft_label = draft_label or config.draft_label
        self.show_draft_button = show_draft_button
        self.title = title or self.schema.title

        self.store = FormStore(self.schema, data)
        self.pipeline = SubmissionPipeline(
            self.store,
            on_submit or _discard_submission,
            reject_concurrent=reject_concurrent_submit,
        )

    @classmethod
    def from_definition(
        cls,
        definition: FormDefinition | dict[str, Any],
        **kwargs: Any,
    ) -> "JsonForm":
        """Build a form from a form definition or its payload dict."""
        if not isinstance(definition, FormDefinition):
            definition = FormDefinition.from_payload(definition)
        kwargs.setdefault("data", definition.form_data)
        kwargs.setdefault("title", definition.display_title)
        return cls(schema=definition.json_schema, layout=definition.layout, **kwargs)

    # State

    @property
    def state(self) -> FormState:
        return self.store.snapshot()

    @property
    def values(self) -> dict[str, Any]:
        return self.store.values

    @property
    def errors(self) -> dict[str, str]:
        return self.store.errors

    @property
    def touched(self) -> dict[str, bool]:
        return self.store.touched

    @property
    def is_submitting(self) -> bool:
        return self.store.is_submitting

    @property
    def is_valid(self) -> bool:
        return self.store.is_valid

    # Store operations

    def set_value(self, name: str, value: Any) -> None:
        self.store.set_value(name, value)

    def set_touched(self, name: str) -> None:
        self.store.set_touched(name)

    def validate_field(self, name: str) -> str | None:
        return self.store.validate_field(name)

    def validate_form(self) -> bool:
        return self.store.validate_form()

    def reset(self) -> None:
        self.store.reset()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.store.subscribe(listener)

    # Actions

    async def submit(self, event: SubmitEvent | None = None) -> bool:
        """Run the submission pipeline. See SubmissionPipeline.handle_submit."""
        return await self.pipeline.handle_submit(event)

    async def save_draft(self) -> None:
        """
        Hand the raw current values to the draft callback.

        Drafts skip validation and numeric coercion entirely.
        """
        if self.on_save_draft is None:
            logger.debug("save_draft called without a draft handler")
            return
        result = self.on_save_draft(copy.deepcopy(self.store.values))
        if inspect.isawaitable(result):
            await result

    # Rendering

    def render(self) -> FormView:
        """Render the current state into a form view."""
        body = render(
            self.layout,
            self.schema,
            self.store.values,
            self.store.errors,
            self.store.touched,
            self.store.set_value,
            self.store.set_touched,
            registry=self.registry,
        )

        submitting = self.store.is_submitting
        actions = []
        if self.show_draft_button and self.on_save_draft is not None:
            actions.append(
                Button(
                    label=self.draft_label,
                    kind="button",
                    disabled=submitting,
                    on_click=self.save_draft,
                )
            )
        actions.append(
            Button(
                label=self.submitting_label if submitting else self.submit_label,
                kind="submit",
                disabled=submitting,
                on_click=self.submit,
            )
        )

        return FormView(
            title=Heading(self.title) if self.title else None,
            body=body,
            actions=actions,
        )

    def to_html(self) -> str:
        return to_html(self.render())


def _discard_submission(values: dict[str, Any]) -> None:
    logger.info("No submit handler configured; discarding %d value(s)", len(values))


def render_form(
    schema: DataSchema | dict[str, Any],
    layout: LayoutNode | dict[str, Any] | None = None,
    data: Mapping[str, Any] | None = None,
    touch_all: bool = False,
) -> str:
    """
    Convenience function to render a form straight to HTML.

    Args:
        schema: Data schema.
        layout: Layout; defaults to one control per property.
        data: Initial values.
        touch_all: Run whole-form validation first so every error shows.

    Example:
        >>> html = render_form(
        ...     {"properties": {"origin": {"type": "string", "enum": ["AU", "US"]}}},
        ... )
    """
    form = JsonForm(schema=schema, layout=layout, data=data)
    if touch_all:
        form.validate_form()
    return form.to_html()
