"""Tests for the command line."""

import json

import pytest

from trade_forms.cli import build_parser, main


@pytest.fixture
def definition_file(tmp_path, schema_dict, layout_dict):
    path = tmp_path / "declaration.json"
    path.write_text(
        json.dumps({"title": "Export", "jsonSchema": schema_dict, "uiSchema": layout_dict}),
        encoding="utf-8",
    )
    return path


def write_json(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestRender:
    """Tests for the render command."""

    def test_render(self, definition_file, capsys):
        assert main(["render", str(definition_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<form novalidate><h2>Export</h2>")
        assert "field-error" not in out

    def test_render_with_data_and_errors(self, tmp_path, definition_file, capsys):
        data = write_json(tmp_path, "draft.json", {"exporter": "ACME", "qty": "lots"})
        assert main(["render", str(definition_file), "--data", str(data), "--touch-all"]) == 0
        out = capsys.readouterr().out
        assert 'value="ACME"' in out
        assert "Invalid type: expected a number" in out


class TestValidate:
    """Tests for the validate command."""

    def test_valid(self, tmp_path, definition_file, capsys):
        data = write_json(tmp_path, "data.json", {"exporter": "ACME", "qty": "12", "origin": "AU"})
        assert main(["validate", str(definition_file), str(data)]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["is_valid"] is True
        assert result["errors"] == {}
        assert result["values"]["qty"] == 12

    def test_invalid(self, tmp_path, definition_file, capsys):
        data = write_json(tmp_path, "data.json", {"qty": "12", "origin": "FR"})
        assert main(["validate", str(definition_file), str(data)]) == 1
        result = json.loads(capsys.readouterr().out)
        assert result["is_valid"] is False
        assert result["errors"] == {
            "exporter": "This field is required",
            "origin": "Not an allowed value",
        }
        assert result["values"]["qty"] == "12"


class TestErrors:
    """Tests for error exit codes."""

    def test_missing_definition(self, tmp_path, capsys):
        assert main(["render", str(tmp_path / "nope.json")]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_data_not_an_object(self, tmp_path, definition_file, capsys):
        data = write_json(tmp_path, "data.json", [1, 2])
        assert main(["validate", str(definition_file), str(data)]) == 2
        assert "must contain a JSON object" in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
