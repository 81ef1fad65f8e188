"""
Form state snapshot.

The store keeps its own mutable state; hosts receive this immutable
snapshot when they need to make decisions (for example disabling a
draft button while a submission is in flight).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FormState(BaseModel):
    """Point-in-time view of a form's state."""

    values: dict[str, Any] = Field(default_factory=dict, description="Current values")
    errors: dict[str, str] = Field(
        default_factory=dict, description="Messages for failing properties only"
    )
    touched: dict[str, bool] = Field(default_factory=dict, description="Touched properties")
    is_submitting: bool = Field(default=False, description="Submission in flight")
    is_valid: bool = Field(default=True, description="Whole-schema validity of values")

    model_config = ConfigDict(frozen=True)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def visible_error(self, name: str) -> str | None:
        """The error for a property, only once it has been touched."""
        if self.touched.get(name, False):
            return self.errors.get(name)
        return None
