"""Per-call conversion state."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from xsd_jsonschema.model import XsdElement
from xsd_jsonschema.options import ConvertOptions, DialectConfig
from xsd_jsonschema.registry import TypeRegistry
from xsd_jsonschema.types import build_type_map

logger = logging.getLogger(__name__)


class DeclarationKind(Enum):
    """Kinds of named declarations, each with its own namespace."""

    COMPLEX_TYPE = "complexType"
    SIMPLE_TYPE = "simpleType"
    GROUP = "group"


class ResolutionStack:
    """Names of the declarations currently being resolved.

    One stack per declaration kind. A name is only blocked while it is on
    the active path, so sibling branches may resolve it again.
    """

    def __init__(self) -> None:
        self._stacks: dict[DeclarationKind, list[str]] = {kind: [] for kind in DeclarationKind}

    def is_active(self, kind: DeclarationKind, name: str) -> bool:
        return name in self._stacks[kind]

    def push(self, kind: DeclarationKind, name: str) -> None:
        self._stacks[kind].append(name)

    def pop(self, kind: DeclarationKind) -> str | None:
        stack = self._stacks[kind]
        return stack.pop() if stack else None

    def depth(self, kind: DeclarationKind) -> int:
        return len(self._stacks[kind])

    @contextmanager
    def entered(self, kind: DeclarationKind, name: str | None) -> Iterator[bool]:
        """Enter a declaration for the duration of the block.

        Yields False, without entering, when ``name`` is already being
        resolved. Anonymous declarations (``name`` is None) always enter.

        Example:
            with stack.entered(DeclarationKind.GROUP, "Address") as entered:
                if entered:
                    ...
        """
        if name is None:
            yield True
            return
        if self.is_active(kind, name):
            logger.debug("Cycle on %s %r, not descending", kind.value, name)
            yield False
            return
        self.push(kind, name)
        try:
            yield True
        finally:
            self.pop(kind)


def is_array_element(
    options: ConvertOptions, element: XsdElement, in_sequence: bool
) -> bool:
    """Decide whether an element is emitted as an array.

    The element must sit directly in a sequence and be unbounded; it is then
    an array when unbounded elements are treated as arrays, or when its name
    is allow-listed.
    """
    if not in_sequence or not element.occurs.is_unbounded:
        return False
    if options.treat_unbounded_as_array:
        return True
    return element.name is not None and options.is_array_name(element.name)


@dataclass
class ConvertContext:
    """State owned by a single conversion call."""

    options: ConvertOptions
    registry: TypeRegistry
    type_map: dict[str, dict[str, Any]]
    stack: ResolutionStack = field(default_factory=ResolutionStack)

    @classmethod
    def create(cls, options: ConvertOptions, registry: TypeRegistry) -> ConvertContext:
        return cls(
            options=options,
            registry=registry,
            type_map=build_type_map(options.type_mappings),
        )

    @property
    def dialect(self) -> DialectConfig:
        return self.options.dialect

    def is_primitive(self, type_name: str) -> bool:
        return type_name in self.type_map

    def is_array_element(self, element: XsdElement, in_sequence: bool) -> bool:
        return is_array_element(self.options, element, in_sequence)
