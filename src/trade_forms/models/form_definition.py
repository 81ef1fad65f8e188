"""
Form definition models.

A form definition bundles everything a declaration screen needs: the
data schema, the layout and optional pre-filled data. Definitions arrive
either as a flat command set (``formId``, ``title``, ``jsonSchema``,
``uiSchema``, ``formData``) or wrapped in a task payload envelope
(``{"version": 1, "content": {"schema": ..., "uischema": ...}}``).
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trade_forms.models.data_schema import DataSchema
from trade_forms.models.layout import LayoutNode, default_layout, layout_to_dict, parse_layout


class FormDefinitionError(ValueError):
    """Raised when a form definition cannot be read or parsed."""


class FormDefinition(BaseModel):
    """Complete description of one form."""

    form_id: str = Field(default="form", alias="formId", description="Form identifier")
    title: str | None = Field(default=None, description="Display title")
    json_schema: DataSchema = Field(..., alias="jsonSchema", description="Data schema")
    ui_schema: LayoutNode | None = Field(
        default=None, alias="uiSchema", description="Layout; generated when absent"
    )
    form_data: dict[str, Any] | None = Field(
        default=None, alias="formData", description="Pre-filled values"
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("ui_schema", mode="before")
    @classmethod
    def _parse_ui_schema(cls, value: Any) -> Any:
        if value is None:
            return None
        return parse_layout(value)

    @property
    def layout(self) -> LayoutNode:
        """The layout to render, falling back to one control per property."""
        if self.ui_schema is not None:
            return self.ui_schema
        return default_layout(list(self.json_schema.properties))

    @property
    def display_title(self) -> str | None:
        return self.title or self.json_schema.title

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "FormDefinition":
        """
        Build a definition from either supported wire shape.

        Args:
            payload: A command set dict, or a task payload envelope with a
                ``content`` key holding ``schema`` and ``uischema``.

        Raises:
            FormDefinitionError: If the payload matches neither shape.
        """
        if not isinstance(payload, dict):
            raise FormDefinitionError(
                f"Form payload must be an object, got {type(payload).__name__}"
            )

        if "content" in payload:
            content = payload["content"] or {}
            data = {
                "formId": payload.get("formId", "form"),
                "title": payload.get("title"),
                "jsonSchema": content.get("schema"),
                "uiSchema": content.get("uischema"),
                "formData": content.get("data"),
            }
        else:
            data = payload

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise FormDefinitionError(f"Invalid form definition: {e}") from e

    def to_command_set(self) -> dict[str, Any]:
        """Export in the flat command set shape."""
        result: dict[str, Any] = {
            "formId": self.form_id,
            "title": self.display_title,
            "jsonSchema": self.json_schema.to_json_schema(),
            "uiSchema": layout_to_dict(self.layout),
        }
        if self.form_data is not None:
            result["formData"] = self.form_data
        return result


def load_form_definition(path: str | Path) -> FormDefinition:
    """
    Read a form definition from a JSON file.

    Raises:
        FormDefinitionError: If the file is missing, not JSON, or not a
            valid definition.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FormDefinitionError(f"Could not read form definition {path}: {e}") from e

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        raise FormDefinitionError(f"Form definition {path} is not valid JSON: {e}") from e

    return FormDefinition.from_payload(payload)
