"""Resolved control model."""

import builtins

from pydantic import BaseModel, Field

from trade_forms.models.data_schema import PropertySchema
from trade_forms.models.layout import ControlOptions


class ResolvedControl(BaseModel):
    """A layout control matched to its data property."""

    name: str = Field(..., description="Property name")
    label: str = Field(..., description="Display label, empty when hidden")
    property: PropertySchema = Field(..., description="Bound property schema")
    required: bool = Field(default=False, description="Whether the property is required")
    options: ControlOptions | None = Field(default=None, description="Control options")

    @builtins.property
    def has_label(self) -> bool:
        return self.label != ""
