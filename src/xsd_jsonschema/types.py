"""XSD built-in types and their JSON Schema equivalents."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

XSD_PREFIX = "xs"


class XsdBuiltinType(Enum):
    """XSD built-in types."""

    STRING = "string"
    NORMALIZED_STRING = "normalizedString"
    TOKEN = "token"
    LANGUAGE = "language"
    NAME = "Name"
    NCNAME = "NCName"
    NMTOKEN = "NMTOKEN"
    ID = "ID"
    IDREF = "IDREF"
    IDREFS = "IDREFS"
    ENTITY = "ENTITY"
    ENTITIES = "ENTITIES"
    QNAME = "QName"
    NOTATION = "NOTATION"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    FLOAT = "float"
    DOUBLE = "double"
    INTEGER = "integer"
    NON_POSITIVE_INTEGER = "nonPositiveInteger"
    NEGATIVE_INTEGER = "negativeInteger"
    NON_NEGATIVE_INTEGER = "nonNegativeInteger"
    POSITIVE_INTEGER = "positiveInteger"
    LONG = "long"
    INT = "int"
    SHORT = "short"
    BYTE = "byte"
    UNSIGNED_LONG = "unsignedLong"
    UNSIGNED_INT = "unsignedInt"
    UNSIGNED_SHORT = "unsignedShort"
    UNSIGNED_BYTE = "unsignedByte"
    DURATION = "duration"
    DATETIME = "dateTime"
    TIME = "time"
    DATE = "date"
    G_YEAR_MONTH = "gYearMonth"
    G_YEAR = "gYear"
    G_MONTH_DAY = "gMonthDay"
    G_DAY = "gDay"
    G_MONTH = "gMonth"
    HEX_BINARY = "hexBinary"
    BASE64_BINARY = "base64Binary"
    ANY_URI = "anyURI"

    @property
    def qualified_name(self) -> str:
        """Get the prefixed name used in type references (e.g. ``xs:int``)."""
        return f"{XSD_PREFIX}:{self.value}"


_STRING: dict[str, Any] = {"type": "string"}
_INTEGER: dict[str, Any] = {"type": "integer"}
_NUMBER: dict[str, Any] = {"type": "number"}
_DATE: dict[str, Any] = {"type": "string", "format": "date"}
_BYTE: dict[str, Any] = {"type": "string", "format": "byte"}

_BUILTIN_MAPPINGS: dict[XsdBuiltinType, dict[str, Any]] = {
    XsdBuiltinType.STRING: _STRING,
    XsdBuiltinType.NORMALIZED_STRING: _STRING,
    XsdBuiltinType.TOKEN: _STRING,
    XsdBuiltinType.LANGUAGE: _STRING,
    XsdBuiltinType.NAME: _STRING,
    XsdBuiltinType.NCNAME: _STRING,
    XsdBuiltinType.NMTOKEN: _STRING,
    XsdBuiltinType.ID: _STRING,
    XsdBuiltinType.IDREF: _STRING,
    XsdBuiltinType.IDREFS: _STRING,
    XsdBuiltinType.ENTITY: _STRING,
    XsdBuiltinType.ENTITIES: _STRING,
    XsdBuiltinType.QNAME: _STRING,
    XsdBuiltinType.NOTATION: _STRING,
    XsdBuiltinType.BOOLEAN: {"type": "boolean"},
    XsdBuiltinType.DECIMAL: _NUMBER,
    XsdBuiltinType.FLOAT: _NUMBER,
    XsdBuiltinType.DOUBLE: _NUMBER,
    XsdBuiltinType.INTEGER: _INTEGER,
    XsdBuiltinType.NON_POSITIVE_INTEGER: {"type": "integer", "maximum": 0},
    XsdBuiltinType.NEGATIVE_INTEGER: {"type": "integer", "exclusiveMaximum": 0},
    XsdBuiltinType.NON_NEGATIVE_INTEGER: {"type": "integer", "minimum": 0},
    XsdBuiltinType.POSITIVE_INTEGER: {"type": "integer", "exclusiveMinimum": 0},
    XsdBuiltinType.LONG: _INTEGER,
    XsdBuiltinType.INT: _INTEGER,
    XsdBuiltinType.SHORT: _INTEGER,
    XsdBuiltinType.BYTE: _INTEGER,
    XsdBuiltinType.UNSIGNED_LONG: _INTEGER,
    XsdBuiltinType.UNSIGNED_INT: _INTEGER,
    XsdBuiltinType.UNSIGNED_SHORT: _INTEGER,
    XsdBuiltinType.UNSIGNED_BYTE: _INTEGER,
    XsdBuiltinType.DURATION: {"type": "string", "format": "duration"},
    XsdBuiltinType.DATETIME: {"type": "string", "format": "date-time"},
    XsdBuiltinType.TIME: {"type": "string", "format": "time"},
    XsdBuiltinType.DATE: _DATE,
    XsdBuiltinType.G_YEAR_MONTH: _DATE,
    XsdBuiltinType.G_YEAR: _DATE,
    XsdBuiltinType.G_MONTH_DAY: _DATE,
    XsdBuiltinType.G_DAY: _DATE,
    XsdBuiltinType.G_MONTH: _DATE,
    XsdBuiltinType.HEX_BINARY: _BYTE,
    XsdBuiltinType.BASE64_BINARY: _BYTE,
    XsdBuiltinType.ANY_URI: {"type": "string", "format": "uri"},
}

# Built-in table keyed by prefixed type name, e.g. "xs:dateTime"
PRIMITIVE_TYPE_MAP: dict[str, dict[str, Any]] = {
    builtin.qualified_name: mapping for builtin, mapping in _BUILTIN_MAPPINGS.items()
}


def build_type_map(
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
) -> dict[str, dict[str, Any]]:
    """Shallow-merge caller mappings over the built-in primitive table.

    Args:
        overrides: Extra or replacement mappings keyed by type name. Entries
            win over built-ins on key collision.

    Returns:
        A fresh mapping table owned by the caller.
    """
    type_map = {name: dict(mapping) for name, mapping in PRIMITIVE_TYPE_MAP.items()}
    for name, mapping in (overrides or {}).items():
        type_map[name] = dict(mapping)
    return type_map
