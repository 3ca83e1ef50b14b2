"""Tree model of a parsed XSD document.

The model is built from a dict tree in the shape produced by
:func:`xsd_jsonschema.parser.parse_xsd` (and by common XML-to-dict parsers):
child tags are keys holding one node or a list of nodes, and attributes are
keys prefixed with ``@_``. Every child read goes through :func:`as_list`, so
singular and repeated children are handled alike.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

ATTRIBUTE_PREFIX = "@_"
UNBOUNDED = "unbounded"

T = TypeVar("T")


def as_list(value: T | list[T] | None) -> list[T]:
    """Treat a child value as a list of 0..n nodes."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def _node(value: Any) -> dict[str, Any] | None:
    """Get the first child node as a dict, ignoring text-only children."""
    for item in as_list(value):
        if isinstance(item, dict):
            return item
    return None


def _nodes(value: Any) -> list[dict[str, Any]]:
    return [item for item in as_list(value) if isinstance(item, dict)]


def _attr(data: dict[str, Any], name: str) -> str | None:
    value = data.get(f"{ATTRIBUTE_PREFIX}{name}")
    if value is None:
        return None
    return str(value)


def _parse_min_occurs(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass
class Occurs:
    """Occurrence bounds of an element or group reference.

    ``min_occurs`` is None when the attribute is absent (defaults to 1).
    ``max_occurs`` keeps the raw attribute; only ``"unbounded"`` is
    interpreted symbolically.
    """

    min_occurs: int | None = None
    max_occurs: str | None = None

    @property
    def is_optional(self) -> bool:
        return self.min_occurs == 0

    @property
    def is_unbounded(self) -> bool:
        return self.max_occurs == UNBOUNDED

    @property
    def min_items(self) -> int | None:
        """Get the lower bound for an array wrapper, if one applies."""
        if self.min_occurs is not None and self.min_occurs > 0:
            return self.min_occurs
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Occurs:
        return cls(
            min_occurs=_parse_min_occurs(_attr(data, "minOccurs")),
            max_occurs=_attr(data, "maxOccurs"),
        )


@dataclass
class XsdRestriction:
    """A ``restriction`` with its facets."""

    base: str | None = None
    enumeration: list[str] = field(default_factory=list)
    patterns: list[str] = field(default_factory=list)
    min_inclusive: str | None = None
    max_inclusive: str | None = None
    min_exclusive: str | None = None
    max_exclusive: str | None = None
    min_length: str | None = None
    max_length: str | None = None
    length: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdRestriction:
        def facet(name: str) -> str | None:
            node = _node(data.get(name))
            return _attr(node, "value") if node is not None else None

        def facet_values(name: str) -> list[str]:
            values = (_attr(node, "value") for node in _nodes(data.get(name)))
            return [value for value in values if value is not None]

        return cls(
            base=_attr(data, "base"),
            enumeration=facet_values("enumeration"),
            patterns=facet_values("pattern"),
            min_inclusive=facet("minInclusive"),
            max_inclusive=facet("maxInclusive"),
            min_exclusive=facet("minExclusive"),
            max_exclusive=facet("maxExclusive"),
            min_length=facet("minLength"),
            max_length=facet("maxLength"),
            length=facet("length"),
        )


@dataclass
class XsdUnion:
    """A ``union`` of space-separated member types."""

    member_types: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdUnion:
        member_types = _attr(data, "memberTypes") or ""
        return cls(member_types=member_types.split())


@dataclass
class XsdList:
    """A ``list`` with a named item type or an inline item simple type."""

    item_type: str | None = None
    simple_type: XsdSimpleType | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdList:
        simple_type = _node(data.get("simpleType"))
        return cls(
            item_type=_attr(data, "itemType"),
            simple_type=XsdSimpleType.from_dict(simple_type) if simple_type is not None else None,
        )


@dataclass
class XsdSimpleType:
    """A named or anonymous ``simpleType``."""

    name: str | None = None
    restriction: XsdRestriction | None = None
    union: XsdUnion | None = None
    list_type: XsdList | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdSimpleType:
        restriction = _node(data.get("restriction"))
        union = _node(data.get("union"))
        list_node = _node(data.get("list"))
        return cls(
            name=_attr(data, "name"),
            restriction=XsdRestriction.from_dict(restriction) if restriction is not None else None,
            union=XsdUnion.from_dict(union) if union is not None else None,
            list_type=XsdList.from_dict(list_node) if list_node is not None else None,
        )


@dataclass
class XsdAttribute:
    """An ``attribute`` declaration."""

    name: str | None = None
    type_name: str | None = None
    use: str | None = None
    simple_type: XsdSimpleType | None = None

    @property
    def is_required(self) -> bool:
        return self.use == "required"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdAttribute:
        simple_type = _node(data.get("simpleType"))
        return cls(
            name=_attr(data, "name"),
            type_name=_attr(data, "type"),
            use=_attr(data, "use"),
            simple_type=XsdSimpleType.from_dict(simple_type) if simple_type is not None else None,
        )


@dataclass
class XsdSequence:
    """A ``sequence`` of child elements and group references.

    Elements and group references are kept in separate lists; element
    properties are always emitted before group content.
    """

    elements: list[XsdElement] = field(default_factory=list)
    groups: list[XsdGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdSequence:
        return cls(
            elements=[XsdElement.from_dict(e) for e in _nodes(data.get("element"))],
            groups=[XsdGroup.from_dict(g) for g in _nodes(data.get("group"))],
        )


def _sequence(data: dict[str, Any]) -> XsdSequence | None:
    node = _node(data.get("sequence"))
    return XsdSequence.from_dict(node) if node is not None else None


@dataclass
class XsdGroup:
    """A ``group`` definition (``name``) or reference (``ref``)."""

    name: str | None = None
    ref: str | None = None
    occurs: Occurs = field(default_factory=Occurs)
    sequence: XsdSequence | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdGroup:
        return cls(
            name=_attr(data, "name"),
            ref=_attr(data, "ref"),
            occurs=Occurs.from_dict(data),
            sequence=_sequence(data),
        )


@dataclass
class XsdExtension:
    """An ``extension`` inside ``simpleContent`` or ``complexContent``."""

    base: str | None = None
    sequence: XsdSequence | None = None
    attributes: list[XsdAttribute] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdExtension:
        return cls(
            base=_attr(data, "base"),
            sequence=_sequence(data),
            attributes=[XsdAttribute.from_dict(a) for a in _nodes(data.get("attribute"))],
        )


def _extension(data: dict[str, Any] | None) -> XsdExtension | None:
    if data is None:
        return None
    node = _node(data.get("extension"))
    return XsdExtension.from_dict(node) if node is not None else None


@dataclass
class XsdComplexType:
    """A named or anonymous ``complexType``."""

    name: str | None = None
    sequence: XsdSequence | None = None
    simple_content: XsdExtension | None = None
    complex_content: XsdExtension | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdComplexType:
        return cls(
            name=_attr(data, "name"),
            sequence=_sequence(data),
            simple_content=_extension(_node(data.get("simpleContent"))),
            complex_content=_extension(_node(data.get("complexContent"))),
        )


@dataclass
class XsdElement:
    """An ``element`` declaration."""

    name: str | None = None
    type_name: str | None = None
    occurs: Occurs = field(default_factory=Occurs)
    use: str | None = None
    complex_type: XsdComplexType | None = None
    simple_type: XsdSimpleType | None = None

    @property
    def is_required(self) -> bool:
        return not self.occurs.is_optional and self.use != "optional"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdElement:
        complex_type = _node(data.get("complexType"))
        simple_type = _node(data.get("simpleType"))
        return cls(
            name=_attr(data, "name"),
            type_name=_attr(data, "type"),
            occurs=Occurs.from_dict(data),
            use=_attr(data, "use"),
            complex_type=XsdComplexType.from_dict(complex_type)
            if complex_type is not None
            else None,
            simple_type=XsdSimpleType.from_dict(simple_type) if simple_type is not None else None,
        )


@dataclass
class XsdSchema:
    """Top-level declarations of a ``schema``."""

    elements: list[XsdElement] = field(default_factory=list)
    complex_types: list[XsdComplexType] = field(default_factory=list)
    simple_types: list[XsdSimpleType] = field(default_factory=list)
    groups: list[XsdGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdSchema:
        return cls(
            elements=[XsdElement.from_dict(e) for e in _nodes(data.get("element"))],
            complex_types=[
                XsdComplexType.from_dict(c) for c in _nodes(data.get("complexType"))
            ],
            simple_types=[
                XsdSimpleType.from_dict(s) for s in _nodes(data.get("simpleType"))
            ],
            groups=[XsdGroup.from_dict(g) for g in _nodes(data.get("group"))],
        )


@dataclass
class XsdDocument:
    """A parsed XSD document; ``schema`` is None when there is no root schema."""

    schema: XsdSchema | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XsdDocument:
        schema = data.get("schema")
        if schema is None:
            return cls()
        # An empty <xs:schema/> parses to a scalar.
        return cls(schema=XsdSchema.from_dict(schema if isinstance(schema, dict) else {}))
