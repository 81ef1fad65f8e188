"""Shared fixtures for the trade forms tests."""

import pytest

from trade_forms.models import DataSchema, parse_layout


DECLARATION_SCHEMA = {
    "title": "Export Declaration",
    "type": "object",
    "properties": {
        "exporter": {"type": "string", "title": "Exporter Name"},
        "email": {"type": "string", "format": "email", "title": "Contact Email"},
        "qty": {"type": "number", "title": "Quantity"},
        "packages": {"type": "integer"},
        "origin": {"type": "string", "enum": ["AU", "US"]},
        "mode": {
            "type": "string",
            "oneOf": [
                {"const": "SEA", "title": "Sea Freight"},
                {"const": "AIR", "title": "Air Freight"},
            ],
        },
        "hazardous": {"type": "boolean", "title": "Hazardous Goods"},
        "notes": {"type": "string", "default": "n/a"},
    },
    "required": ["exporter", "qty", "origin"],
}

DECLARATION_LAYOUT = {
    "type": "VerticalLayout",
    "elements": [
        {"type": "Label", "text": "Shipment details"},
        {
            "type": "HorizontalLayout",
            "elements": [
                {"type": "Control", "scope": "#/properties/exporter"},
                {"type": "Control", "scope": "#/properties/email"},
            ],
        },
        {
            "type": "Group",
            "label": "Goods",
            "elements": [
                {"type": "Control", "scope": "#/properties/qty"},
                {"type": "Control", "scope": "#/properties/origin"},
                {"type": "Control", "scope": "#/properties/hazardous"},
            ],
        },
        {"type": "Control", "scope": "#/properties/notes", "options": {"multi": True}},
        {"type": "Control", "scope": "#/properties/missing"},
    ],
}


@pytest.fixture
def schema_dict() -> dict:
    return {**DECLARATION_SCHEMA, "properties": dict(DECLARATION_SCHEMA["properties"])}


@pytest.fixture
def schema() -> DataSchema:
    return DataSchema.model_validate(DECLARATION_SCHEMA)


@pytest.fixture
def layout_dict() -> dict:
    return DECLARATION_LAYOUT


@pytest.fixture
def layout():
    return parse_layout(DECLARATION_LAYOUT)


@pytest.fixture
def qty_schema() -> DataSchema:
    return DataSchema.model_validate(
        {"properties": {"qty": {"type": "number"}}, "required": ["qty"]}
    )
