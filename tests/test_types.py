"""Tests for the built-in primitive type table."""

from __future__ import annotations

import pytest

from xsd_jsonschema.types import PRIMITIVE_TYPE_MAP, XsdBuiltinType, build_type_map


class TestXsdBuiltinType:
    """Tests for XsdBuiltinType."""

    def test_qualified_name(self) -> None:
        """Test prefixed names used in type references."""
        assert XsdBuiltinType.INT.qualified_name == "xs:int"
        assert XsdBuiltinType.DATETIME.qualified_name == "xs:dateTime"
        assert XsdBuiltinType.ANY_URI.qualified_name == "xs:anyURI"

    def test_every_builtin_is_mapped(self) -> None:
        """Test that the table covers each built-in type exactly once."""
        assert len(PRIMITIVE_TYPE_MAP) == len(XsdBuiltinType) == 43
        for builtin in XsdBuiltinType:
            assert builtin.qualified_name in PRIMITIVE_TYPE_MAP


class TestPrimitiveTypeMap:
    """Tests for individual primitive mappings."""

    @pytest.mark.parametrize(
        "type_name,expected",
        [
            ("xs:string", {"type": "string"}),
            ("xs:token", {"type": "string"}),
            ("xs:boolean", {"type": "boolean"}),
            ("xs:decimal", {"type": "number"}),
            ("xs:double", {"type": "number"}),
            ("xs:int", {"type": "integer"}),
            ("xs:unsignedByte", {"type": "integer"}),
            ("xs:dateTime", {"type": "string", "format": "date-time"}),
            ("xs:date", {"type": "string", "format": "date"}),
            ("xs:gYear", {"type": "string", "format": "date"}),
            ("xs:time", {"type": "string", "format": "time"}),
            ("xs:duration", {"type": "string", "format": "duration"}),
            ("xs:base64Binary", {"type": "string", "format": "byte"}),
            ("xs:anyURI", {"type": "string", "format": "uri"}),
        ],
    )
    def test_mapping(self, type_name: str, expected: dict) -> None:
        """Test the JSON Schema equivalent of a built-in type."""
        assert PRIMITIVE_TYPE_MAP[type_name] == expected

    def test_integer_bounds(self) -> None:
        """Test sign-restricted integer types carry their bound."""
        assert PRIMITIVE_TYPE_MAP["xs:positiveInteger"] == {"type": "integer", "exclusiveMinimum": 0}
        assert PRIMITIVE_TYPE_MAP["xs:nonNegativeInteger"] == {"type": "integer", "minimum": 0}
        assert PRIMITIVE_TYPE_MAP["xs:negativeInteger"] == {"type": "integer", "exclusiveMaximum": 0}
        assert PRIMITIVE_TYPE_MAP["xs:nonPositiveInteger"] == {"type": "integer", "maximum": 0}

    def test_unprefixed_names_are_not_builtins(self) -> None:
        """Test that only the xs: prefix is recognized."""
        assert "string" not in PRIMITIVE_TYPE_MAP
        assert "xsd:string" not in PRIMITIVE_TYPE_MAP


class TestBuildTypeMap:
    """Tests for build_type_map."""

    def test_returns_copy(self) -> None:
        """Test that the result can be changed without touching the built-ins."""
        type_map = build_type_map()
        type_map["xs:string"]["format"] = "email"
        type_map["xs:custom"] = {"type": "string"}

        assert PRIMITIVE_TYPE_MAP["xs:string"] == {"type": "string"}
        assert "xs:custom" not in PRIMITIVE_TYPE_MAP

    def test_overrides_win(self) -> None:
        """Test caller mappings replace built-ins and add new names."""
        type_map = build_type_map(
            {
                "xs:decimal": {"type": "string"},
                "tns:Money": {"type": "number", "minimum": 0},
            }
        )
        assert type_map["xs:decimal"] == {"type": "string"}
        assert type_map["tns:Money"] == {"type": "number", "minimum": 0}
        assert type_map["xs:int"] == {"type": "integer"}
