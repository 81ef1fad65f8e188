"""
Data models for the trade forms engine.

This module contains Pydantic models for:
- Data schemas (properties, types, closed choices)
- Layout schemas (layouts, controls, labels)
- Resolved controls and form state snapshots
- Form definitions as delivered by the declaration backend
"""

from trade_forms.models.data_schema import (
    ChoiceOption,
    DataSchema,
    PropertySchema,
    PropertyType,
)
from trade_forms.models.layout import (
    Control,
    ControlOptions,
    Group,
    HorizontalLayout,
    Label,
    Layout,
    LayoutNode,
    VerticalLayout,
    default_layout,
    parse_layout,
    scope_for,
)
from trade_forms.models.resolved_control import ResolvedControl
from trade_forms.models.form_state import FormState
from trade_forms.models.form_definition import (
    FormDefinition,
    FormDefinitionError,
    load_form_definition,
)

__all__ = [
    # Data schema
    "ChoiceOption",
    "DataSchema",
    "PropertySchema",
    "PropertyType",
    # Layout
    "Control",
    "ControlOptions",
    "Group",
    "HorizontalLayout",
    "Label",
    "Layout",
    "LayoutNode",
    "VerticalLayout",
    "default_layout",
    "parse_layout",
    "scope_for",
    # State
    "ResolvedControl",
    "FormState",
    # Definitions
    "FormDefinition",
    "FormDefinitionError",
    "load_form_definition",
]
