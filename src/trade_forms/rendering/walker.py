"""
Layout walker.

Walks a layout tree depth first, pre-order, and returns the render tree
for the current form state. The walker keeps no state of its own, so it
can run again after every change to values, errors or touched flags.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from typing_extensions import assert_never

from trade_forms.engine.classifier import classify
from trade_forms.engine.resolver import resolve_control
from trade_forms.models.data_schema import DataSchema
from trade_forms.models.layout import (
    Control,
    Group,
    HorizontalLayout,
    Label,
    LayoutNode,
    VerticalLayout,
)
from trade_forms.rendering.nodes import Caption, FieldProps, Fieldset, RenderNode, Stack
from trade_forms.rendering.widgets import WidgetRegistry, default_registry

logger = logging.getLogger("trade-forms.walker")


@dataclass
class RenderContext:
    """Shared state accessors threaded through the walk."""

    schema: DataSchema
    values: Mapping[str, Any]
    errors: Mapping[str, str | None]
    touched: Mapping[str, bool]
    set_value: Callable[[str, Any], None]
    set_touched: Callable[[str], None]
    registry: WidgetRegistry


def render(
    node: LayoutNode,
    schema: DataSchema,
    values: Mapping[str, Any],
    errors: Mapping[str, str | None],
    touched: Mapping[str, bool],
    set_value: Callable[[str, Any], None],
    set_touched: Callable[[str], None],
    registry: WidgetRegistry | None = None,
) -> RenderNode | None:
    """
    Render a layout tree.

    Returns:
        The render tree, or None when the root is a control that does
        not resolve against the schema.
    """
    context = RenderContext(
        schema=schema,
        values=values,
        errors=errors,
        touched=touched,
        set_value=set_value,
        set_touched=set_touched,
        registry=registry or default_registry(),
    )
    return render_node(node, context)


def render_node(node: LayoutNode, context: RenderContext) -> RenderNode | None:
    match node:
        case VerticalLayout():
            return _render_children("vertical", node.elements, context)
        case HorizontalLayout():
            return _render_children("horizontal", node.elements, context)
        case Group():
            content = _render_children("vertical", node.elements, context)
            if node.label:
                return Fieldset(legend=node.label, content=content)
            return content
        case Control():
            return _render_control(node, context)
        case Label():
            return Caption(text=node.text)
        case _:
            assert_never(node)


def _render_children(direction: str, elements: list[LayoutNode], context: RenderContext) -> Stack:
    children = []
    for element in elements:
        child = render_node(element, context)
        if child is not None:
            children.append(child)
    return Stack(direction=direction, children=children)


def _render_control(control: Control, context: RenderContext) -> RenderNode | None:
    resolved = resolve_control(control, context.schema)
    if resolved is None:
        return None

    name = resolved.name
    props = FieldProps(
        control=resolved,
        kind=classify(resolved),
        value=context.values.get(name),
        error=context.errors.get(name),
        touched=context.touched.get(name, False),
        on_change=lambda value: context.set_value(name, value),
        on_blur=lambda: context.set_touched(name),
    )
    return context.registry.create(props)
