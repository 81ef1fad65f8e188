"""Tests for the form state store."""

from trade_forms.engine.store import FormStore, get_initial_values
from trade_forms.engine.validator import NOT_ALLOWED_MESSAGE, REQUIRED_MESSAGE
from trade_forms.models import FormState


class TestInitialValues:
    """Tests for get_initial_values."""

    def test_one_value_per_property(self, schema):
        """Test exactly one entry per declared property."""
        values = get_initial_values(schema, {"qty": 3, "unknown": "dropped"})
        assert set(values) == set(schema.properties)

    def test_priority(self, schema):
        """Test data, then default, then type-appropriate empty value."""
        values = get_initial_values(schema, {"notes": "fragile"})
        assert values["notes"] == "fragile"

        values = get_initial_values(schema)
        assert values["notes"] == "n/a"
        assert values["exporter"] == ""
        assert values["hazardous"] is False
        assert values["qty"] is None
        assert values["packages"] is None

    def test_supplied_data_not_shared(self, schema):
        """Test that seeded values are copies of the supplied data."""
        data = {"exporter": "ACME"}
        store = FormStore(schema, data)
        data["exporter"] = "changed"
        assert store.get_value("exporter") == "ACME"


class TestFormStore:
    """Tests for FormStore."""

    def test_initial_state(self, schema):
        """Test a freshly created store."""
        store = FormStore(schema)
        assert store.errors == {}
        assert store.touched == {}
        assert store.is_submitting is False
        assert store.is_valid is False

    def test_valid_without_touch(self, schema):
        """Test that a form can be valid before anything is touched."""
        store = FormStore(schema, {"exporter": "ACME", "qty": "5", "origin": "AU"})
        assert store.is_valid
        assert store.touched == {}

    def test_set_value_validates_field(self, schema):
        """Test required-empty then fixed."""
        store = FormStore(schema)
        store.set_value("exporter", "")
        assert store.errors["exporter"] == REQUIRED_MESSAGE

        store.set_value("exporter", "x")
        assert "exporter" not in store.errors
        assert store.get_error("exporter") is None

    def test_set_value_only_validates_that_field(self, schema):
        """Test that other fields keep their error state."""
        store = FormStore(schema)
        store.set_value("origin", "FR")
        assert store.errors == {"origin": NOT_ALLOWED_MESSAGE}

    def test_set_value_recomputes_validity(self, schema):
        """Test derived validity after every write."""
        store = FormStore(schema, {"exporter": "ACME", "origin": "AU"})
        assert not store.is_valid
        store.set_value("qty", "12")
        assert store.is_valid
        store.set_value("qty", "lots")
        assert not store.is_valid

    def test_set_value_unknown_property(self, schema):
        """Test that undeclared names leave the state untouched."""
        store = FormStore(schema)
        store.set_value("missing", "x")
        assert "missing" not in store.values
        assert "missing" not in store.errors

    def test_set_touched_idempotent(self, schema):
        """Test touching twice."""
        store = FormStore(schema)
        store.set_touched("qty")
        store.set_touched("qty")
        assert store.touched == {"qty": True}

    def test_validate_field(self, schema):
        """Test re-validating without a new value."""
        store = FormStore(schema)
        assert store.validate_field("exporter") == REQUIRED_MESSAGE
        assert store.errors == {"exporter": REQUIRED_MESSAGE}
        assert store.validate_field("email") is None
        assert store.validate_field("missing") is None

    def test_validate_form_touches_everything(self, schema):
        """Test whole-form validation."""
        store = FormStore(schema)
        assert store.validate_form() is False
        assert set(store.errors) == {"exporter", "qty", "origin"}
        assert store.touched == {name: True for name in schema.properties}

    def test_validate_form_replaces_errors(self, schema):
        """Test that stale errors are dropped."""
        store = FormStore(schema, {"exporter": "ACME", "qty": 1, "origin": "AU"})
        store.set_value("origin", "FR")
        store.set_value("origin", "US")
        assert store.validate_form() is True
        assert store.errors == {}

    def test_reset(self, schema):
        """Test restoring the initial state."""
        store = FormStore(schema, {"qty": 2})
        store.set_value("qty", "abc")
        store.set_touched("qty")
        store.validate_form()

        store.reset()
        assert store.values == store.initial_values
        assert store.get_value("qty") == 2
        assert store.errors == {}
        assert store.touched == {}

    def test_reset_twice(self, schema):
        """Test that reset is idempotent."""
        store = FormStore(schema)
        store.set_value("exporter", "ACME")
        store.reset()
        first = store.snapshot()
        store.reset()
        assert store.snapshot() == first

    def test_snapshot(self, schema):
        """Test the state snapshot."""
        store = FormStore(schema)
        store.set_value("origin", "FR")
        store.set_touched("origin")
        state = store.snapshot()
        assert isinstance(state, FormState)
        assert state.values["origin"] == "FR"
        assert state.visible_error("origin") == NOT_ALLOWED_MESSAGE
        assert state.is_submitting is False

    def test_returned_maps_are_copies(self, schema):
        """Test that callers cannot mutate store state directly."""
        store = FormStore(schema)
        store.values["exporter"] = "sneaky"
        store.touched["exporter"] = True
        assert store.get_value("exporter") == ""
        assert not store.is_touched("exporter")


class TestSubscriptions:
    """Tests for change notifications."""

    def test_notifications(self, schema):
        """Test listeners receive the changed property name."""
        store = FormStore(schema)
        seen = []
        store.subscribe(seen.append)

        store.set_value("qty", 1)
        store.set_touched("qty")
        store.set_touched("qty")
        store.validate_form()
        store.reset()

        assert seen == ["qty", "qty", None, None]

    def test_unsubscribe(self, schema):
        """Test removing a listener."""
        store = FormStore(schema)
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        store.set_value("qty", 1)
        assert seen == []
