"""Tests for conversion options and dialects."""

from __future__ import annotations

import pytest

from xsd_jsonschema.options import DIALECT_CONFIGS, ConvertOptions, SchemaDialect


class TestDialectConfig:
    """Tests for the per-dialect output settings."""

    def test_draft_2020_12(self) -> None:
        """Test the 2020-12 dialect."""
        config = DIALECT_CONFIGS[SchemaDialect.DRAFT_2020_12]
        assert config.schema_uri == "https://json-schema.org/draft/2020-12/schema"
        assert config.definitions_key == "$defs"
        assert config.ref("Person") == "#/$defs/Person"

    def test_draft_07(self) -> None:
        """Test the draft-07 dialect."""
        config = DIALECT_CONFIGS[SchemaDialect.DRAFT_07]
        assert config.schema_uri == "http://json-schema.org/draft-07/schema#"
        assert config.definitions_key == "definitions"
        assert config.ref("Person") == "#/definitions/Person"


class TestConvertOptions:
    """Tests for ConvertOptions."""

    def test_defaults(self) -> None:
        """Test default option values."""
        options = ConvertOptions()
        assert options.array_element_names == ()
        assert options.treat_unbounded_as_array is False
        assert options.show_origin_types is False
        assert options.type_mappings == {}
        assert options.schema_dialect is SchemaDialect.DRAFT_2020_12
        assert options.dialect.definitions_key == "$defs"

    def test_string_dialect(self) -> None:
        """Test a dialect given by value is coerced to the enum."""
        options = ConvertOptions(schema_dialect="draft-07")
        assert options.schema_dialect is SchemaDialect.DRAFT_07

    def test_unknown_dialect(self) -> None:
        """Test an unknown dialect value is rejected."""
        with pytest.raises(ValueError):
            ConvertOptions(schema_dialect="draft-04")

    def test_array_names_from_list(self) -> None:
        """Test array element names are stored as a tuple."""
        options = ConvertOptions(array_element_names=["item", "entry"])
        assert options.array_element_names == ("item", "entry")
        assert options.is_array_name("item")
        assert not options.is_array_name("order")


class TestResolve:
    """Tests for ConvertOptions.resolve."""

    def test_none(self) -> None:
        """Test None resolves to defaults."""
        assert ConvertOptions.resolve(None) == ConvertOptions()

    def test_instance_passes_through(self) -> None:
        """Test an existing instance is returned as is."""
        options = ConvertOptions(show_origin_types=True)
        assert ConvertOptions.resolve(options) is options

    def test_mapping(self) -> None:
        """Test a mapping of field names."""
        options = ConvertOptions.resolve(
            {"treat_unbounded_as_array": True, "schema_dialect": "draft-07"}
        )
        assert options.treat_unbounded_as_array is True
        assert options.schema_dialect is SchemaDialect.DRAFT_07

    def test_unknown_key(self) -> None:
        """Test unknown option names are rejected."""
        with pytest.raises(TypeError, match="treatUnboundedAsArray"):
            ConvertOptions.resolve({"treatUnboundedAsArray": True})
