"""Name-keyed registries of top-level XSD declarations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol, TypeVar

from xsd_jsonschema.model import (
    XsdComplexType,
    XsdGroup,
    XsdSchema,
    XsdSimpleType,
)

logger = logging.getLogger(__name__)


class _Named(Protocol):
    name: str | None


N = TypeVar("N", bound=_Named)


def _index_by_name(declarations: Iterable[N], kind: str) -> dict[str, N]:
    index: dict[str, N] = {}
    for declaration in declarations:
        name = declaration.name
        if not name:
            continue
        if name in index:
            logger.debug("Duplicate %s %r, keeping the later declaration", kind, name)
        index[name] = declaration
    return index


@dataclass
class TypeRegistry:
    """Lookup tables for named complex types, simple types and groups.

    The three kinds live in independent namespaces. Anonymous declarations
    are skipped; on duplicate names the later declaration wins.
    """

    complex_types: dict[str, XsdComplexType] = field(default_factory=dict)
    simple_types: dict[str, XsdSimpleType] = field(default_factory=dict)
    groups: dict[str, XsdGroup] = field(default_factory=dict)

    @classmethod
    def from_schema(cls, schema: XsdSchema | None) -> TypeRegistry:
        if schema is None:
            return cls()
        return cls(
            complex_types=_index_by_name(schema.complex_types, "complexType"),
            simple_types=_index_by_name(schema.simple_types, "simpleType"),
            groups=_index_by_name(schema.groups, "group"),
        )

    def get_complex_type(self, name: str | None) -> XsdComplexType | None:
        return self.complex_types.get(name) if name else None

    def get_simple_type(self, name: str | None) -> XsdSimpleType | None:
        return self.simple_types.get(name) if name else None

    def get_group(self, name: str | None) -> XsdGroup | None:
        return self.groups.get(name) if name else None

