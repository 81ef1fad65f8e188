"""
Data schema models.

A data schema is the JSON Schema half of a form description: a flat set
of named scalar properties, their types and their constraints.
"""

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

PropertyType = Literal["string", "number", "integer", "boolean"]

NUMERIC_TYPES = frozenset({"number", "integer"})


class ChoiceOption(BaseModel):
    """A single labelled choice of a ``oneOf`` property."""

    value: Any = Field(
        ...,
        validation_alias=AliasChoices("const", "value"),
        serialization_alias="const",
        description="Stored value",
    )
    label: str | None = Field(
        default=None,
        validation_alias=AliasChoices("title", "label"),
        serialization_alias="title",
        description="Text shown to the user",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else str(self.value)


class PropertySchema(BaseModel):
    """Schema for a single named property."""

    type: PropertyType = Field(default="string", description="JSON Schema scalar type")
    title: str | None = Field(default=None, description="Human-readable label")
    description: str | None = Field(default=None, description="Help text")
    default: Any | None = Field(default=None, description="Value used when no data is supplied")
    format: str | None = Field(default=None, description="Format hint, e.g. email")
    enum: list[Any] | None = Field(default=None, description="Allowed values")
    one_of: list[ChoiceOption] | None = Field(
        default=None,
        alias="oneOf",
        description="Allowed values with display labels",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def is_closed_choice(self) -> bool:
        """True when the property only admits a fixed set of values."""
        return self.enum is not None or self.one_of is not None

    @property
    def is_numeric(self) -> bool:
        return self.type in NUMERIC_TYPES

    @property
    def allowed_values(self) -> list[Any]:
        if self.enum is not None:
            return list(self.enum)
        if self.one_of is not None:
            return [option.value for option in self.one_of]
        return []

    @property
    def choices(self) -> list[tuple[Any, str]]:
        """(value, label) pairs in declaration order."""
        if self.enum is not None:
            return [(value, str(value)) for value in self.enum]
        if self.one_of is not None:
            return [(option.value, option.display_label) for option in self.one_of]
        return []


class DataSchema(BaseModel):
    """
    Flat object schema describing every property of a form.

    Unknown JSON Schema keywords (``$schema``, ``type`` and friends) are
    accepted and ignored.
    """

    title: str | None = Field(default=None, description="Form title")
    description: str | None = Field(default=None, description="Form description")
    properties: dict[str, PropertySchema] = Field(
        default_factory=dict, description="Properties keyed by name"
    )
    required: list[str] = Field(
        default_factory=list, description="Names of required properties"
    )

    @model_validator(mode="after")
    def _check_required_subset(self) -> "DataSchema":
        unknown = [name for name in self.required if name not in self.properties]
        if unknown:
            raise ValueError(
                f"Required properties not declared in properties: {', '.join(unknown)}"
            )
        return self

    @property
    def required_names(self) -> frozenset[str]:
        return frozenset(self.required)

    def is_required(self, name: str) -> bool:
        return name in self.required_names

    def to_json_schema(self) -> dict[str, Any]:
        """Export as a JSON Schema dict."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                name: prop.model_dump(by_alias=True, exclude_none=True)
                for name, prop in self.properties.items()
            },
            "required": list(self.required),
        }
        if self.title:
            schema["title"] = self.title
        if self.description:
            schema["description"] = self.description
        return schema
