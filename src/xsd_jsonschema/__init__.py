"""XSD to JSON Schema - convert XML Schema definitions to JSON Schema.

Converts an XSD into a JSON Schema and derives the element paths an XML
parser needs to shape instance documents so they validate against it.

Example:
    from pathlib import Path
    from xsd_jsonschema import convert, parse_xsd, parse_xml, XmlParseOptions

    # Quick conversion
    schema = convert(Path("order.xsd"), {"treat_unbounded_as_array": True})

    # Materialize an instance document with the same array policy
    document = parse_xsd(Path("order.xsd"))
    data = parse_xml(
        Path("order.xml"),
        XmlParseOptions(xsd=document, treat_unbounded_as_array=True),
    )

    # With custom options
    from xsd_jsonschema import ConvertOptions, SchemaDialect, convert_xsd

    options = ConvertOptions(
        array_element_names=("item",),
        schema_dialect=SchemaDialect.DRAFT_07,
        show_origin_types=True,
    )
    schema = convert_xsd(document, options)
"""

from xsd_jsonschema.converter import (
    convert,
    convert_xsd,
    derive_array_paths,
    derive_list_paths,
)
from xsd_jsonschema.errors import (
    RootElementNotFoundError,
    SchemaNotFoundError,
    XsdConversionError,
    XsdParseError,
)
from xsd_jsonschema.materializer import XmlParseOptions, parse_xml
from xsd_jsonschema.model import (
    XsdComplexType,
    XsdDocument,
    XsdElement,
    XsdSchema,
    XsdSimpleType,
)
from xsd_jsonschema.options import (
    DIALECT_CONFIGS,
    ConvertOptions,
    DialectConfig,
    SchemaDialect,
)
from xsd_jsonschema.parser import parse_xsd
from xsd_jsonschema.types import PRIMITIVE_TYPE_MAP, XsdBuiltinType

__version__ = "0.1.0"

__all__ = [
    # Main API
    "convert",
    "convert_xsd",
    "derive_array_paths",
    "derive_list_paths",
    "parse_xsd",
    "parse_xml",
    # Options
    "ConvertOptions",
    "XmlParseOptions",
    "SchemaDialect",
    "DialectConfig",
    "DIALECT_CONFIGS",
    # Errors
    "XsdConversionError",
    "SchemaNotFoundError",
    "RootElementNotFoundError",
    "XsdParseError",
    # Types and model (for advanced usage)
    "XsdBuiltinType",
    "PRIMITIVE_TYPE_MAP",
    "XsdDocument",
    "XsdSchema",
    "XsdElement",
    "XsdComplexType",
    "XsdSimpleType",
]
