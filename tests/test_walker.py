"""Tests for the layout walker and widget registry."""

from dataclasses import dataclass

from trade_forms.engine.store import FormStore
from trade_forms.models import parse_layout
from trade_forms.rendering import (
    Caption,
    CheckboxField,
    Fieldset,
    NumberField,
    SelectField,
    Stack,
    TextareaField,
    TextField,
    WidgetRegistry,
    default_registry,
    render,
)
from trade_forms.rendering.nodes import FieldWidget, iter_widgets


def render_store(store, layout, registry=None):
    return render(
        layout,
        store.schema,
        store.values,
        store.errors,
        store.touched,
        store.set_value,
        store.set_touched,
        registry=registry,
    )


class TestWalker:
    """Tests for render()."""

    def test_tree_shape(self, schema, layout):
        """Test the render tree for a nested layout."""
        tree = render_store(FormStore(schema), layout)

        assert isinstance(tree, Stack)
        assert tree.direction == "vertical"
        caption, row, goods, notes = tree.children

        assert caption == Caption(text="Shipment details")
        assert row.direction == "horizontal"
        assert [type(w) for w in row.children] == [TextField, TextField]

        assert isinstance(goods, Fieldset)
        assert goods.legend == "Goods"
        assert [type(w) for w in goods.content.children] == [
            NumberField,
            SelectField,
            CheckboxField,
        ]
        assert isinstance(notes, TextareaField)

    def test_unresolvable_control_skipped(self, schema, layout):
        """Test that a control naming an undeclared property renders nothing."""
        tree = render_store(FormStore(schema), layout)
        names = [w.props.name for w in iter_widgets(tree)]
        assert "missing" not in names
        assert names == ["exporter", "email", "qty", "origin", "hazardous", "notes"]

    def test_unresolvable_root(self, schema):
        """Test a lone control with nothing to bind to."""
        layout = parse_layout({"type": "Control", "scope": "#/properties/missing"})
        assert render_store(FormStore(schema), layout) is None

    def test_unlabelled_group(self, schema):
        """Test that a group without a label has no boundary."""
        layout = parse_layout(
            {"type": "Group", "elements": [{"type": "Control", "scope": "#/properties/qty"}]}
        )
        tree = render_store(FormStore(schema), layout)
        assert isinstance(tree, Stack)
        assert tree.direction == "vertical"
        assert isinstance(tree.children[0], NumberField)

    def test_labels(self, schema):
        """Test explicit, hidden and derived labels."""
        layout = parse_layout(
            {
                "type": "VerticalLayout",
                "elements": [
                    {"type": "Control", "scope": "#/properties/exporter", "label": "Shipper"},
                    {"type": "Control", "scope": "#/properties/qty", "label": False},
                    {"type": "Control", "scope": "#/properties/packages"},
                ],
            }
        )
        widgets = list(iter_widgets(render_store(FormStore(schema), layout)))
        assert [w.props.label for w in widgets] == ["Shipper", "", "packages"]
        assert widgets[0].props.required

    def test_bound_state(self, schema, layout):
        """Test that widgets carry the current value, error and touched flag."""
        store = FormStore(schema, {"qty": "abc"})
        store.set_touched("qty")
        store.validate_field("qty")

        widget = next(w for w in iter_widgets(render_store(store, layout)) if w.props.name == "qty")
        assert widget.props.value == "abc"
        assert widget.props.error == "Invalid type: expected a number"
        assert widget.props.visible_error == widget.props.error

    def test_errors_hidden_until_touched(self, schema, layout):
        store = FormStore(schema)
        store.validate_field("exporter")
        widget = next(iter_widgets(render_store(store, layout)))
        assert widget.props.error is not None
        assert widget.props.visible_error is None

    def test_change_and_blur_feed_the_store(self, schema, layout):
        """Test widget callbacks."""
        store = FormStore(schema)
        tree = render_store(store, layout)
        origin = next(w for w in iter_widgets(tree) if w.props.name == "origin")

        origin.change("FR")
        assert store.get_value("origin") == "FR"
        assert store.get_error("origin") == "Not an allowed value"
        assert not store.is_touched("origin")

        origin.blur()
        assert store.is_touched("origin")

    def test_rerender_reflects_changes(self, schema, layout):
        """Test that the walker keeps no state between renders."""
        store = FormStore(schema)
        first = render_store(store, layout)
        store.set_value("hazardous", True)
        second = render_store(store, layout)

        def checkbox(tree):
            return next(w for w in iter_widgets(tree) if isinstance(w, CheckboxField))

        assert not checkbox(first).checked
        assert checkbox(second).checked


@dataclass
class DateField(FieldWidget):
    component = "date"


class TestWidgetRegistry:
    """Tests for WidgetRegistry."""

    def test_default_kinds(self):
        registry = default_registry()
        assert set(registry.kinds) == {"text", "email", "number", "textarea", "select", "checkbox"}
        assert "date" not in registry

    def test_unknown_kind_falls_back_to_text(self, schema):
        """Test that a format override with no widget renders as text."""
        layout = parse_layout(
            {"type": "Control", "scope": "#/properties/exporter", "options": {"format": "date"}}
        )
        widget = render_store(FormStore(schema), layout)
        assert isinstance(widget, TextField)
        assert widget.props.kind == "date"
        assert widget.input_type == "date"

    def test_custom_kind(self, schema):
        """Test registering a widget for an extra kind."""
        registry = default_registry()
        registry.register("date", DateField)
        layout = parse_layout(
            {"type": "Control", "scope": "#/properties/exporter", "options": {"format": "date"}}
        )
        assert isinstance(render_store(FormStore(schema), layout, registry), DateField)

    def test_copy_is_independent(self):
        registry = default_registry()
        copied = registry.copy()
        copied.unregister("checkbox")
        assert "checkbox" in registry
        assert "checkbox" not in copied

    def test_custom_fallback(self, schema):
        registry = WidgetRegistry({"textarea": TextareaField}, fallback="textarea")
        layout = parse_layout({"type": "Control", "scope": "#/properties/qty"})
        assert isinstance(render_store(FormStore(schema), layout, registry), TextareaField)
