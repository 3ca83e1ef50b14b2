"""Main entry points: XSD to JSON Schema conversion and path derivation."""

from __future__ import annotations

from typing import Any, Mapping, Union

from xsd_jsonschema.context import ConvertContext
from xsd_jsonschema.emitter import JsonSchema, SchemaEmitter
from xsd_jsonschema.model import XsdDocument
from xsd_jsonschema.options import ConvertOptions
from xsd_jsonschema.parser import XmlSource, parse_xsd
from xsd_jsonschema.paths import ArrayPathCollector, ListPathCollector
from xsd_jsonschema.registry import TypeRegistry

OptionsArg = Union[ConvertOptions, Mapping[str, Any], None]


def convert_xsd(document: XsdDocument, options: OptionsArg = None) -> JsonSchema:
    """Convert a parsed XSD document into a JSON Schema.

    Args:
        document: The parsed XSD document (see :func:`parse_xsd`).
        options: Conversion options, as a ConvertOptions or a mapping of
            its field names.

    Returns:
        The JSON Schema as a plain dict.

    Raises:
        SchemaNotFoundError: If the document has no root schema.
        RootElementNotFoundError: If the schema declares no element.

    Example:
        document = parse_xsd(Path("person.xsd"))
        schema = convert_xsd(document, {"treat_unbounded_as_array": True})
    """
    resolved = ConvertOptions.resolve(options)
    context = ConvertContext.create(resolved, TypeRegistry.from_schema(document.schema))
    return SchemaEmitter(context).emit(document)


def convert(source: XmlSource, options: OptionsArg = None) -> JsonSchema:
    """Parse XSD text, bytes, or a file path and convert it to JSON Schema."""
    return convert_xsd(parse_xsd(source), options)


def derive_array_paths(document: XsdDocument, options: OptionsArg = None) -> set[str]:
    """Collect dot-separated paths of elements emitted as arrays.

    Uses the same array policy as :func:`convert_xsd`, so every path in the
    result is an array in the converted schema under the same options.

    Args:
        document: The parsed XSD document.
        options: Array policy (``array_element_names``,
            ``treat_unbounded_as_array``); other options are ignored.

    Returns:
        The set of paths, empty if the document has no schema or root element.
    """
    schema = document.schema
    if schema is None or not schema.elements:
        return set()
    collector = ArrayPathCollector(TypeRegistry.from_schema(schema), ConvertOptions.resolve(options))
    return collector.collect(schema)


def derive_list_paths(document: XsdDocument) -> set[str]:
    """Collect dot-separated paths of elements whose type is an ``xs:list``.

    Args:
        document: The parsed XSD document.

    Returns:
        The set of paths, empty if the document has no schema or root element.
    """
    schema = document.schema
    if schema is None or not schema.elements:
        return set()
    return ListPathCollector(TypeRegistry.from_schema(schema)).collect(schema)
