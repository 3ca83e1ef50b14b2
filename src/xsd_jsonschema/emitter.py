"""JSON Schema emission from the XSD tree model.

Named complex and simple types are emitted once into the dialect's
definitions container and referenced with ``$ref``; anonymous types are
resolved in place. Nodes that cannot be resolved come back as None and are
left out of their parent.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from xsd_jsonschema.context import ConvertContext, DeclarationKind
from xsd_jsonschema.errors import RootElementNotFoundError, SchemaNotFoundError
from xsd_jsonschema.model import (
    ATTRIBUTE_PREFIX,
    XsdAttribute,
    XsdComplexType,
    XsdDocument,
    XsdElement,
    XsdExtension,
    XsdList,
    XsdRestriction,
    XsdSequence,
    XsdSimpleType,
)

logger = logging.getLogger(__name__)

JsonSchema = dict[str, Any]

TEXT_PROPERTY = "#text"
ORIGIN_TYPE_KEY = "xsdOriginType"

# Keywords a restriction inherits from its base type mapping
RESTRICTION_KEYWORDS = (
    "type",
    "format",
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "minLength",
    "maxLength",
    "pattern",
    "enum",
    "anyOf",
    "allOf",
    ORIGIN_TYPE_KEY,
)

NUMERIC_FACETS = (
    ("min_inclusive", "minimum"),
    ("max_inclusive", "maximum"),
    ("min_exclusive", "exclusiveMinimum"),
    ("max_exclusive", "exclusiveMaximum"),
)

_NUMBER_PATTERN = re.compile(r"^[-+]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][-+]?[0-9]+)?$")


def parse_facet_number(raw: str | None) -> int | float | None:
    """Parse a facet value as a number, or None if it is not one."""
    if raw is None:
        return None
    text = raw.strip()
    if not _NUMBER_PATTERN.match(text):
        logger.debug("Ignoring non-numeric facet value %r", raw)
        return None
    try:
        return int(text)
    except ValueError:
        pass
    value = float(text)
    return value if math.isfinite(value) else None


def escape_pattern_anchors(pattern: str) -> str:
    """Escape literal ``^`` and ``$`` in an XSD pattern.

    XSD patterns are implicitly anchored and treat both characters as
    literals. Backslash escapes are passed through unchanged.
    """
    escaped = False
    normalized: list[str] = []
    for char in pattern:
        if escaped:
            normalized.append(char)
            escaped = False
        elif char == "\\":
            normalized.append(char)
            escaped = True
        elif char in "^$":
            normalized.append(f"\\{char}")
        else:
            normalized.append(char)
    return "".join(normalized)


def normalize_xsd_pattern(pattern: str) -> str:
    """Anchor an XSD pattern for use as a JSON Schema ``pattern``."""
    return f"^(?:{escape_pattern_anchors(pattern)})$"


class SchemaEmitter:
    """Builds a JSON Schema document from an XSD document.

    Example:
        context = ConvertContext.create(options, TypeRegistry.from_schema(schema))
        json_schema = SchemaEmitter(context).emit(document)
    """

    def __init__(self, context: ConvertContext):
        self.context = context
        self.options = context.options
        self.dialect = context.dialect

    def emit(self, document: XsdDocument) -> JsonSchema:
        """Emit the JSON Schema document.

        Args:
            document: The parsed XSD document.

        Returns:
            The JSON Schema as a plain dict.

        Raises:
            SchemaNotFoundError: If the document has no root schema.
            RootElementNotFoundError: If the schema declares no element.
        """
        schema = document.schema
        if schema is None:
            raise SchemaNotFoundError()
        if not schema.elements:
            raise RootElementNotFoundError()

        json_schema: JsonSchema = {
            "$schema": self.dialect.schema_uri,
            "type": "object",
            "properties": {},
            "required": [],
        }
        definitions: JsonSchema = {}
        json_schema[self.dialect.definitions_key] = definitions

        for element in schema.elements:
            prop = self.element_schema(element)
            if prop is None:
                continue
            json_schema["properties"][element.name] = prop
            if element.is_required:
                _add_required(json_schema, element.name)

        for simple_type in schema.simple_types:
            if not simple_type.name:
                continue
            definition = self.simple_type_schema(simple_type)
            if definition is None:
                logger.debug("Skipping unresolvable simpleType %r", simple_type.name)
                continue
            definitions[simple_type.name] = definition

        for complex_type in schema.complex_types:
            if not complex_type.name:
                continue
            definitions[complex_type.name] = self.complex_type_schema(complex_type)

        return json_schema

    def element_schema(
        self,
        element: XsdElement,
        in_sequence: bool = False,
        force_array: bool = False,
    ) -> JsonSchema | None:
        """Convert an element declaration into a property schema."""
        if not element.name:
            return None

        if force_array or self.context.is_array_element(element, in_sequence):
            items = self.element_schema(element)
            if items is None:
                # The path deriver records every array element, so keep the
                # property with unconstrained items.
                logger.debug("Element %r has unresolvable items", element.name)
                items = {}
            prop: JsonSchema = {"type": "array"}
            min_items = element.occurs.min_items
            if min_items is not None:
                prop["minItems"] = min_items
            prop["items"] = items
            return prop

        prop = {}
        if element.simple_type is not None:
            inline = self.simple_type_schema(element.simple_type)
            if inline is None and element.complex_type is None:
                logger.debug("Omitting element %r with unresolvable simpleType", element.name)
                return None
            prop.update(inline or {})
        elif element.type_name:
            if self.options.show_origin_types:
                prop[ORIGIN_TYPE_KEY] = element.type_name
            if self.context.is_primitive(element.type_name):
                prop.update(self._primitive_type(element.type_name))
            else:
                prop["$ref"] = self.dialect.ref(element.type_name)

        # A type reference plus an inline complexType is tolerated; the
        # complex content wins on key collisions.
        if element.complex_type is not None:
            prop.update(self.complex_type_schema(element.complex_type))

        return prop

    def complex_type_schema(self, complex_type: XsdComplexType) -> JsonSchema:
        """Resolve complex type content.

        complexContent extension takes priority over simpleContent
        extension, which takes priority over a plain sequence.
        """
        stack = self.context.stack
        with stack.entered(DeclarationKind.COMPLEX_TYPE, complex_type.name) as entered:
            if not entered:
                return {}
            extension = complex_type.complex_content
            if extension is not None and extension.base:
                return self._complex_content_schema(extension)
            extension = complex_type.simple_content
            if extension is not None and extension.base:
                return self._simple_content_schema(extension)
            return self.object_schema(complex_type.sequence)

    def object_schema(
        self,
        sequence: XsdSequence | None,
        attributes: list[XsdAttribute] | None = None,
    ) -> JsonSchema:
        """Build an object schema from a sequence and attribute list."""
        definition: JsonSchema = {"type": "object", "properties": {}, "required": []}
        self._append_sequence(definition, sequence, optional=False, repeats=False)
        self._append_attributes(definition, attributes or [])
        return definition

    def _append_sequence(
        self,
        definition: JsonSchema,
        sequence: XsdSequence | None,
        optional: bool,
        repeats: bool,
    ) -> None:
        if sequence is None:
            return

        force_array = repeats and self.options.treat_unbounded_as_array
        for element in sequence.elements:
            child = self.element_schema(element, in_sequence=True, force_array=force_array)
            if child is None:
                continue
            definition["properties"][element.name] = child
            if not optional and element.is_required:
                _add_required(definition, element.name)

        stack = self.context.stack
        for group_ref in sequence.groups:
            if not group_ref.ref:
                continue
            group = self.context.registry.get_group(group_ref.ref)
            if group is None or group.sequence is None:
                logger.debug("Skipping unresolvable group reference %r", group_ref.ref)
                continue
            with stack.entered(DeclarationKind.GROUP, group_ref.ref) as entered:
                if not entered:
                    continue
                self._append_sequence(
                    definition,
                    group.sequence,
                    optional=optional or group_ref.occurs.is_optional,
                    repeats=repeats or group_ref.occurs.is_unbounded,
                )

    def _append_attributes(
        self, definition: JsonSchema, attributes: list[XsdAttribute]
    ) -> None:
        for attribute in attributes:
            if not attribute.name:
                continue
            attribute_schema = self.attribute_schema(attribute)
            if attribute_schema is None:
                continue
            property_name = f"{ATTRIBUTE_PREFIX}{attribute.name}"
            definition["properties"][property_name] = attribute_schema
            if attribute.is_required:
                _add_required(definition, property_name)

    def _complex_content_schema(self, extension: XsdExtension) -> JsonSchema:
        return {
            "allOf": [
                self.type_schema(extension.base),
                self.object_schema(extension.sequence, extension.attributes),
            ]
        }

    def _simple_content_schema(self, extension: XsdExtension) -> JsonSchema:
        definition: JsonSchema = {
            "type": "object",
            "properties": {TEXT_PROPERTY: self.type_schema(extension.base)},
            "required": [TEXT_PROPERTY],
        }
        self._append_attributes(definition, extension.attributes)
        return definition

    def attribute_schema(self, attribute: XsdAttribute) -> JsonSchema | None:
        if attribute.type_name:
            return self.type_schema(attribute.type_name)
        if attribute.simple_type is not None and attribute.simple_type.restriction:
            return self.restriction_schema(attribute.simple_type.restriction)
        return None

    def type_schema(self, type_name: str) -> JsonSchema:
        """Schema for a type referenced by name: a primitive or a ``$ref``."""
        if self.context.is_primitive(type_name):
            schema = self._primitive_type(type_name)
        else:
            schema = {"$ref": self.dialect.ref(type_name)}
        if self.options.show_origin_types:
            schema[ORIGIN_TYPE_KEY] = type_name
        return schema

    def _primitive_type(self, type_name: str) -> JsonSchema:
        mapping = self.context.type_map[type_name]
        schema: JsonSchema = {"type": mapping.get("type")}
        if mapping.get("format"):
            schema["format"] = mapping["format"]
        return schema

    def simple_type_schema(self, simple_type: XsdSimpleType) -> JsonSchema | None:
        """Resolve a simple type by shape: list, restriction or union."""
        if simple_type.list_type is not None:
            return self.list_schema(simple_type.list_type)
        if simple_type.restriction is not None:
            return self.restriction_schema(simple_type.restriction)
        if simple_type.union is not None:
            if not simple_type.union.member_types:
                return None
            return {
                "anyOf": [
                    self._union_member_schema(member)
                    for member in simple_type.union.member_types
                ]
            }
        return None

    def _union_member_schema(self, type_name: str) -> JsonSchema:
        if self.context.is_primitive(type_name):
            schema = dict(self.context.type_map[type_name])
            schema.pop(ORIGIN_TYPE_KEY, None)
            return schema
        return {"$ref": self.dialect.ref(type_name)}

    def list_schema(self, list_type: XsdList) -> JsonSchema | None:
        if list_type.item_type:
            items = self.type_schema(list_type.item_type)
        elif list_type.simple_type is not None:
            items = self.simple_type_schema(list_type.simple_type)
        else:
            items = None
        if items is None:
            return None
        return {"type": "array", "items": items}

    def restriction_schema(self, restriction: XsdRestriction) -> JsonSchema | None:
        """Resolve a restriction of a primitive base type with its facets."""
        base = restriction.base
        if not base or not self.context.is_primitive(base):
            logger.debug("Unsupported restriction base %r", base)
            return None

        mapping = self.context.type_map[base]
        result: JsonSchema = {"type": mapping.get("type")}
        for keyword in RESTRICTION_KEYWORDS:
            if mapping.get(keyword) is not None:
                result[keyword] = mapping[keyword]
        if self.options.show_origin_types:
            result[ORIGIN_TYPE_KEY] = base

        if restriction.enumeration:
            result["enum"] = list(restriction.enumeration)

        if result["type"] == "string":
            _apply_length_facets(result, restriction)
            _apply_pattern_facets(result, restriction)
        elif result["type"] in ("number", "integer"):
            _apply_numeric_facets(result, restriction)
        return result


def _add_required(definition: JsonSchema, name: str) -> None:
    required = definition["required"]
    if name not in required:
        required.append(name)


def _apply_length_facets(result: JsonSchema, restriction: XsdRestriction) -> None:
    min_length = parse_facet_number(restriction.min_length)
    if min_length is not None:
        result["minLength"] = min_length
    max_length = parse_facet_number(restriction.max_length)
    if max_length is not None:
        result["maxLength"] = max_length
    length = parse_facet_number(restriction.length)
    if length is not None:
        result["minLength"] = length
        result["maxLength"] = length


def _apply_pattern_facets(result: JsonSchema, restriction: XsdRestriction) -> None:
    patterns = restriction.patterns
    if len(patterns) == 1:
        result["pattern"] = normalize_xsd_pattern(patterns[0])
    elif len(patterns) > 1:
        result["allOf"] = [{"pattern": normalize_xsd_pattern(p)} for p in patterns]


def _apply_numeric_facets(result: JsonSchema, restriction: XsdRestriction) -> None:
    for attribute, keyword in NUMERIC_FACETS:
        value = parse_facet_number(getattr(restriction, attribute))
        if value is not None:
            result[keyword] = value
