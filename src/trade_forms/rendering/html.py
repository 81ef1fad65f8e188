"""
HTML output for render trees.

Produces a plain HTML fragment. Text and attribute values are escaped;
classes follow the portal's stylesheet (``vertical-layout``,
``horizontal-layout``, ``field``, ``field-error``).
"""

from html import escape
from typing import Any

from trade_forms.rendering.nodes import (
    Button,
    Caption,
    CheckboxField,
    FieldWidget,
    Fieldset,
    FormView,
    Heading,
    NumberField,
    SelectField,
    Stack,
    TextareaField,
    TextField,
)


def _attrs(**attributes: Any) -> str:
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        name = key.rstrip("_").replace("_", "-")
        if value is True:
            parts.append(name)
        else:
            parts.append(f'{name}="{escape(str(value), quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def _display_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _label(widget: FieldWidget) -> str:
    props = widget.props
    if not props.control.has_label:
        return ""
    marker = '<span class="required">*</span>' if props.required else ""
    return f'<label{_attrs(for_=props.name)}>{escape(props.label)}{marker}</label>'


def _error(widget: FieldWidget) -> str:
    message = widget.props.visible_error
    if message is None:
        return ""
    return f'<p class="field-error">{escape(message)}</p>'


def _control_html(widget: FieldWidget) -> str:
    props = widget.props
    common = {"id": props.name, "name": props.name, "required": props.required}

    if isinstance(widget, CheckboxField):
        return f'<input{_attrs(type="checkbox", checked=widget.checked, **common)}>'
    if isinstance(widget, NumberField):
        return f'<input{_attrs(type="number", step=widget.step, value=_display_value(props.value), **common)}>'
    if isinstance(widget, TextareaField):
        return f'<textarea{_attrs(rows=widget.rows, **common)}>{escape(_display_value(props.value))}</textarea>'
    if isinstance(widget, SelectField):
        options = ['<option value="">Select...</option>']
        for value, text in widget.choices:
            selected = props.value is not None and props.value == value
            options.append(f'<option{_attrs(value=_display_value(value), selected=selected)}>{escape(text)}</option>')
        return f'<select{_attrs(**common)}>{"".join(options)}</select>'
    if isinstance(widget, TextField):
        return f'<input{_attrs(type=widget.input_type, value=_display_value(props.value), **common)}>'

    raise TypeError(f"No HTML output for widget {type(widget).__name__}")


def _widget_html(widget: FieldWidget) -> str:
    if not isinstance(widget, (CheckboxField, NumberField, TextareaField, SelectField, TextField)):
        to_html_method = getattr(widget, "to_html", None)
        if to_html_method is None:
            raise TypeError(f"No HTML output for widget {type(widget).__name__}")
        return to_html_method()

    if isinstance(widget, CheckboxField):
        body = f"{_control_html(widget)}{_label(widget)}"
    else:
        body = f"{_label(widget)}{_control_html(widget)}"
    css = f"field field-{widget.component}"
    return f'<div{_attrs(class_=css)}>{body}{_error(widget)}</div>'


def to_html(node: Any) -> str:
    """Serialize a render tree node (or None) to an HTML fragment."""
    match node:
        case None:
            return ""
        case FormView():
            parts = []
            if node.title is not None:
                parts.append(to_html(node.title))
            parts.append(to_html(node.body))
            if node.actions:
                buttons = "".join(to_html(button) for button in node.actions)
                parts.append(f'<div class="form-actions">{buttons}</div>')
            return f'<form novalidate>{"".join(parts)}</form>'
        case Stack(direction="horizontal"):
            cells = "".join(f'<div class="flex-1">{to_html(child)}</div>' for child in node.children)
            return f'<div class="horizontal-layout flex gap-4">{cells}</div>'
        case Stack():
            return f'<div class="vertical-layout">{"".join(to_html(child) for child in node.children)}</div>'
        case Fieldset():
            return f"<fieldset><legend>{escape(node.legend)}</legend>{to_html(node.content)}</fieldset>"
        case Caption():
            return f'<p class="label">{escape(node.text)}</p>'
        case Heading():
            return f"<h2>{escape(node.text)}</h2>"
        case Button():
            return f"<button{_attrs(type=node.kind, disabled=node.disabled)}>{escape(node.label)}</button>"
        case FieldWidget():
            return _widget_html(node)
        case _:
            to_html_method = getattr(node, "to_html", None)
            if to_html_method is None:
                raise TypeError(f"No HTML output for {type(node).__name__}")
            return to_html_method()
