"""
Trade Forms: schema-driven forms for trade declarations.

Declaration screens are described by a data schema (JSON Schema
properties, types, enumerations) and a separate layout schema (vertical
and horizontal layouts, labelled groups, controls bound to properties).
This package turns the pair into a working form: it resolves controls,
picks widgets, tracks values, errors and touched flags, validates, and
coerces values before handing them to the host's submit handler.

Simple Usage:
    from trade_forms import JsonForm

    form = JsonForm(
        schema={
            "properties": {
                "qty": {"type": "number", "title": "Quantity"},
                "origin": {"type": "string", "enum": ["AU", "US"]},
            },
            "required": ["qty"],
        },
        layout={
            "type": "HorizontalLayout",
            "elements": [
                {"type": "Control", "scope": "#/properties/qty"},
                {"type": "Control", "scope": "#/properties/origin"},
            ],
        },
        on_submit=send_to_backend,
    )

    form.set_value("qty", "12")
    await form.submit()          # send_to_backend({"qty": 12.0, "origin": ""})

Form Definitions:
    from trade_forms import JsonForm, load_form_definition

    definition = load_form_definition("declaration.json")
    form = JsonForm.from_definition(definition, on_submit=send_to_backend)
    html = form.to_html()
"""

from trade_forms.form import JsonForm, render_form
from trade_forms.models import (
    ChoiceOption,
    Control,
    ControlOptions,
    DataSchema,
    FormDefinition,
    FormDefinitionError,
    FormState,
    Group,
    HorizontalLayout,
    Label,
    LayoutNode,
    PropertySchema,
    ResolvedControl,
    VerticalLayout,
    load_form_definition,
    parse_layout,
)
from trade_forms.engine import (
    FormStore,
    FormValidator,
    SubmissionInProgressError,
    SubmissionPipeline,
    WidgetKind,
    classify,
    coerce_values,
    resolve_control,
    validate_all,
    validate_property,
)
from trade_forms.rendering import (
    FormView,
    WidgetRegistry,
    default_registry,
    render,
    to_html,
)
from trade_forms.config import get_config, update_config

__all__ = [
    # Main interface
    "JsonForm",
    "render_form",
    # Models
    "ChoiceOption",
    "Control",
    "ControlOptions",
    "DataSchema",
    "FormDefinition",
    "FormDefinitionError",
    "FormState",
    "Group",
    "HorizontalLayout",
    "Label",
    "LayoutNode",
    "PropertySchema",
    "ResolvedControl",
    "VerticalLayout",
    "load_form_definition",
    "parse_layout",
    # Engine
    "FormStore",
    "FormValidator",
    "SubmissionInProgressError",
    "SubmissionPipeline",
    "WidgetKind",
    "classify",
    "coerce_values",
    "resolve_control",
    "validate_all",
    "validate_property",
    # Rendering
    "FormView",
    "WidgetRegistry",
    "default_registry",
    "render",
    "to_html",
    # Config
    "get_config",
    "update_config",
]

__version__ = "0.1.0"
