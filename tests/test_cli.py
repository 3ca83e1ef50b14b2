"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from tests.fixture_loader import XML_DIR, XSD_DIR
from xsd_jsonschema.cli import main


class TestConvertCommand:
    """Tests for `xsd-jsonschema convert`."""

    def test_stdout(self, order_xsd_path: Path) -> None:
        """Test the schema is printed as JSON."""
        result = CliRunner().invoke(main, ["convert", str(order_xsd_path), "--unbounded-as-array"])
        assert result.exit_code == 0, result.output
        schema = json.loads(result.output)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["$defs"]["OrderType"]["properties"]["item"]["type"] == "array"

    def test_dialect_and_output_file(self, order_xsd_path: Path, tmp_path: Path) -> None:
        """Test writing a draft-07 schema to a file."""
        output = tmp_path / "order.schema.json"
        result = CliRunner().invoke(
            main,
            ["convert", str(order_xsd_path), "--dialect", "draft-07", "--origin-types", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        schema = json.loads(output.read_text(encoding="utf-8"))
        assert "definitions" in schema
        assert schema["properties"]["order"]["xsdOriginType"] == "OrderType"

    def test_array_element(self, order_xsd_path: Path) -> None:
        """Test repeatable --array-element names."""
        result = CliRunner().invoke(
            main, ["convert", str(order_xsd_path), "-a", "note", "-a", "missing"]
        )
        assert result.exit_code == 0, result.output
        properties = json.loads(result.output)["$defs"]["OrderType"]["properties"]
        assert properties["note"]["type"] == "array"
        assert properties["item"] == {"$ref": "#/$defs/ItemType"}

    def test_conversion_error(self, tmp_path: Path) -> None:
        """Test conversion errors exit with status 1."""
        bad = tmp_path / "bad.xsd"
        bad.write_text("<notASchema/>", encoding="utf-8")
        result = CliRunner().invoke(main, ["convert", str(bad)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_file(self) -> None:
        """Test a missing schema file is a usage error."""
        result = CliRunner().invoke(main, ["convert", "does-not-exist.xsd"])
        assert result.exit_code == 2


class TestPathsCommand:
    """Tests for `xsd-jsonschema paths`."""

    def test_json(self) -> None:
        """Test JSON output of both path sets."""
        result = CliRunner().invoke(
            main, ["paths", str(XSD_DIR / "order.xsd"), "-u", "--output", "json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "array_paths": ["order.item", "order.note"],
            "list_paths": ["order.item.sizes"],
        }

    def test_table(self) -> None:
        """Test the table lists each path with its kind."""
        result = CliRunner().invoke(main, ["paths", str(XSD_DIR / "catalog.xsd"), "-u"])
        assert result.exit_code == 0, result.output
        assert "catalog.entry.keyword" in result.output
        assert "catalog.entry.code" in result.output


class TestXmlCommand:
    """Tests for `xsd-jsonschema xml`."""

    def test_materialize(self) -> None:
        """Test a document is printed with derived arrays and lists."""
        result = CliRunner().invoke(
            main,
            ["xml", str(XML_DIR / "order.xml"), "--xsd", str(XSD_DIR / "order.xsd"), "-u"],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["order"]["item"][0]["sizes"] == [38, 40, 42]

    def test_requires_xsd(self) -> None:
        """Test the --xsd option is required."""
        result = CliRunner().invoke(main, ["xml", str(XML_DIR / "order.xml")])
        assert result.exit_code == 2

    def test_malformed_document(self, tmp_path: Path) -> None:
        """Test malformed XML exits with status 1."""
        bad = tmp_path / "bad.xml"
        bad.write_text("<order>", encoding="utf-8")
        result = CliRunner().invoke(main, ["xml", str(bad), "--xsd", str(XSD_DIR / "order.xsd")])
        assert result.exit_code == 1
        assert "Error:" in result.output
