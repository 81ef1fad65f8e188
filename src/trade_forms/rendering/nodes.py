"""
Render tree node types.

The layout walker turns a layout into a tree of these nodes. Field
widgets carry their bound value, error and touched flag plus the
callbacks that feed user input back into the form store.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Literal, Union

from trade_forms.models.resolved_control import ResolvedControl


@dataclass
class FieldProps:
    """Everything a widget needs to display and edit one property."""

    control: ResolvedControl
    kind: str
    value: Any
    error: str | None
    touched: bool
    on_change: Callable[[Any], None]
    on_blur: Callable[[], None]

    @property
    def name(self) -> str:
        return self.control.name

    @property
    def label(self) -> str:
        return self.control.label

    @property
    def required(self) -> bool:
        return self.control.required

    @property
    def visible_error(self) -> str | None:
        """Errors only show once the field has been touched."""
        return self.error if self.touched else None


@dataclass
class FieldWidget:
    """Base class for widgets bound to a property."""

    component: ClassVar[str] = "field"

    props: FieldProps

    def change(self, value: Any) -> None:
        """Simulate user input."""
        self.props.on_change(value)

    def blur(self) -> None:
        """Simulate focus leaving the widget."""
        self.props.on_blur()


@dataclass
class TextField(FieldWidget):
    component: ClassVar[str] = "text"

    # Kinds that map straight onto an HTML input type
    html_input_types: ClassVar[frozenset[str]] = frozenset(
        {"text", "email", "password", "date", "datetime-local", "time", "tel", "url"}
    )

    @property
    def input_type(self) -> str:
        return self.props.kind if self.props.kind in self.html_input_types else "text"


@dataclass
class NumberField(FieldWidget):
    component: ClassVar[str] = "number"

    @property
    def step(self) -> str:
        return "1" if self.props.control.property.type == "integer" else "any"


@dataclass
class TextareaField(FieldWidget):
    component: ClassVar[str] = "textarea"

    @property
    def rows(self) -> int:
        options = self.props.control.options
        if options is not None and options.rows:
            return options.rows
        return 3


@dataclass
class SelectField(FieldWidget):
    component: ClassVar[str] = "select"

    @property
    def choices(self) -> list[tuple[Any, str]]:
        return self.props.control.property.choices


@dataclass
class CheckboxField(FieldWidget):
    component: ClassVar[str] = "checkbox"

    @property
    def checked(self) -> bool:
        return self.props.value is True


@dataclass
class Stack:
    """Children in order, stacked vertically or side by side with equal share."""

    direction: Literal["vertical", "horizontal"]
    children: list["RenderNode"] = field(default_factory=list)


@dataclass
class Fieldset:
    """A labelled boundary around a group's content."""

    legend: str
    content: Stack


@dataclass
class Caption:
    """Non-interactive text from a Label element."""

    text: str


@dataclass
class Heading:
    text: str


@dataclass
class Button:
    label: str
    kind: Literal["submit", "button"]
    disabled: bool = False
    on_click: Callable[[], Any] | None = None


@dataclass
class FormView:
    """Top-level render tree of a host form."""

    title: Heading | None
    body: "RenderNode | None"
    actions: list[Button] = field(default_factory=list)

    def find_widget(self, name: str) -> FieldWidget | None:
        return find_widget(self.body, name)

    def widgets(self) -> list[FieldWidget]:
        return list(iter_widgets(self.body))


RenderNode = Union[Stack, Fieldset, Caption, FieldWidget]


def iter_widgets(node: Any):
    """Yield field widgets in render order."""
    if isinstance(node, FieldWidget):
        yield node
    elif isinstance(node, Stack):
        for child in node.children:
            yield from iter_widgets(child)
    elif isinstance(node, Fieldset):
        yield from iter_widgets(node.content)
    elif isinstance(node, FormView):
        yield from iter_widgets(node.body)


def find_widget(node: Any, name: str) -> FieldWidget | None:
    for widget in iter_widgets(node):
        if widget.props.name == name:
            return widget
    return None
