"""
Rendering layer.

This module contains:
- Render tree node types and the built-in field widgets
- The widget registry used to instantiate widgets by kind
- The layout walker
- HTML serialization of render trees
"""

from trade_forms.rendering.nodes import (
    Button,
    Caption,
    CheckboxField,
    FieldProps,
    FieldWidget,
    Fieldset,
    FormView,
    Heading,
    NumberField,
    RenderNode,
    SelectField,
    Stack,
    TextareaField,
    TextField,
    find_widget,
    iter_widgets,
)
from trade_forms.rendering.widgets import WidgetRegistry, default_registry
from trade_forms.rendering.walker import RenderContext, render, render_node
from trade_forms.rendering.html import to_html

__all__ = [
    "Button",
    "Caption",
    "CheckboxField",
    "FieldProps",
    "FieldWidget",
    "Fieldset",
    "FormView",
    "Heading",
    "NumberField",
    "RenderNode",
    "SelectField",
    "Stack",
    "TextareaField",
    "TextField",
    "find_widget",
    "iter_widgets",
    "WidgetRegistry",
    "default_registry",
    "RenderContext",
    "render",
    "render_node",
    "to_html",
]
