"""
Layout (UI schema) models.

The layout is a tree of JSON Forms style elements discriminated on their
``type`` tag. Layout nodes hold ordered ``elements``; controls bind to a
data property through their ``scope``; labels are plain captions.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ControlOptions(BaseModel):
    """Rendering hints attached to a control."""

    format: str | None = Field(default=None, description="Explicit widget kind override")
    multi: bool | None = Field(default=None, description="Multi-line text input")
    rows: int | None = Field(default=None, description="Visible text rows")

    model_config = ConfigDict(extra="allow")


class Control(BaseModel):
    """A control bound to one data property."""

    type: Literal["Control"] = "Control"
    scope: str = Field(..., description="Reference to a property, e.g. #/properties/name")
    label: str | bool | None = Field(
        default=None,
        description="Label override; false hides the label",
    )
    options: ControlOptions | None = Field(default=None)


class Label(BaseModel):
    """A non-interactive caption."""

    type: Literal["Label"] = "Label"
    text: str = Field(..., description="Caption text")


class _LayoutBase(BaseModel):
    label: str | None = Field(default=None, description="Group legend")
    elements: list["LayoutNode"] = Field(
        default_factory=list, description="Children in render order"
    )


class VerticalLayout(_LayoutBase):
    """Children stacked top to bottom."""

    type: Literal["VerticalLayout"] = "VerticalLayout"


class HorizontalLayout(_LayoutBase):
    """Children side by side, each taking an equal share."""

    type: Literal["HorizontalLayout"] = "HorizontalLayout"


class Group(_LayoutBase):
    """A vertical layout wrapped in a labelled boundary when labelled."""

    type: Literal["Group"] = "Group"


Layout = Union[VerticalLayout, HorizontalLayout, Group]

LayoutNode = Annotated[
    Union[VerticalLayout, HorizontalLayout, Group, Control, Label],
    Field(discriminator="type"),
]

for _model in (VerticalLayout, HorizontalLayout, Group):
    _model.model_rebuild()

_layout_adapter: TypeAdapter[LayoutNode] = TypeAdapter(LayoutNode)


def parse_layout(data: Any) -> LayoutNode:
    """Parse a UI schema dict into a layout node. Nodes pass through untouched."""
    if isinstance(data, (VerticalLayout, HorizontalLayout, Group, Control, Label)):
        return data
    return _layout_adapter.validate_python(data)


def scope_for(name: str) -> str:
    """Build the scope reference for a property name."""
    escaped = name.replace("~", "~0").replace("/", "~1")
    return f"#/properties/{escaped}"


def default_layout(property_names: list[str]) -> VerticalLayout:
    """A vertical layout with one control per property, in the given order."""
    return VerticalLayout(
        elements=[Control(scope=scope_for(name)) for name in property_names]
    )


def layout_to_dict(node: LayoutNode) -> dict[str, Any]:
    return node.model_dump(exclude_none=True)
