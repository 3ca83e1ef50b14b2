"""Element path derivation for the XML materializer.

Both collectors walk the same element / sequence / group / complex type
graph as :class:`~xsd_jsonschema.emitter.SchemaEmitter`, but follow named
complex types into their content instead of emitting ``$ref``. Paths are
dot-joined element names from a root element down, e.g. ``"order.item"``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from xsd_jsonschema.context import DeclarationKind, ResolutionStack, is_array_element
from xsd_jsonschema.model import (
    XsdComplexType,
    XsdElement,
    XsdGroup,
    XsdList,
    XsdSchema,
    XsdSequence,
    XsdSimpleType,
)
from xsd_jsonschema.options import ConvertOptions
from xsd_jsonschema.registry import TypeRegistry

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."


class PathCollector(ABC):
    """Base class for collectors of element paths.

    Each instance owns its own resolution stack, so a collector never shares
    cycle state with an emitter or another collector.
    """

    def __init__(self, registry: TypeRegistry):
        self.registry = registry
        self.stack = ResolutionStack()
        self.paths: set[str] = set()

    def collect(self, schema: XsdSchema) -> set[str]:
        """Collect paths for every root element of the schema."""
        for element in schema.elements:
            self._visit_element(element, (), in_sequence=False, force_array=False)
        return self.paths

    @abstractmethod
    def matches(self, element: XsdElement, in_sequence: bool, force_array: bool) -> bool:
        """Check whether an element's path belongs in the collected set.

        Args:
            element: The element being visited.
            in_sequence: True when the element sits directly in a sequence.
            force_array: True when an enclosing group repeats.

        Returns:
            True to record the element's path.
        """
        pass

    def group_repeats(self, group_ref: XsdGroup, repeats: bool) -> bool:
        """Propagate the repeat flag across a group reference."""
        return repeats

    def _visit_element(
        self,
        element: XsdElement,
        path: tuple[str, ...],
        in_sequence: bool,
        force_array: bool,
    ) -> None:
        if not element.name:
            return

        element_path = (*path, element.name)
        if self.matches(element, in_sequence, force_array):
            self.paths.add(PATH_SEPARATOR.join(element_path))

        complex_type = element.complex_type or self.registry.get_complex_type(element.type_name)
        if complex_type is not None:
            self._visit_complex_type(complex_type, element_path)

    def _visit_sequence(
        self,
        sequence: XsdSequence | None,
        path: tuple[str, ...],
        repeats: bool,
    ) -> None:
        if sequence is None:
            return

        for element in sequence.elements:
            self._visit_element(element, path, in_sequence=True, force_array=repeats)

        for group_ref in sequence.groups:
            if not group_ref.ref:
                continue
            group = self.registry.get_group(group_ref.ref)
            if group is None or group.sequence is None:
                continue
            with self.stack.entered(DeclarationKind.GROUP, group_ref.ref) as entered:
                if entered:
                    self._visit_sequence(
                        group.sequence, path, self.group_repeats(group_ref, repeats)
                    )

    def _visit_complex_type(self, complex_type: XsdComplexType, path: tuple[str, ...]) -> None:
        with self.stack.entered(DeclarationKind.COMPLEX_TYPE, complex_type.name) as entered:
            if not entered:
                return
            self._visit_sequence(complex_type.sequence, path, repeats=False)

            extension = complex_type.complex_content
            if extension is None:
                return
            self._visit_sequence(extension.sequence, path, repeats=False)
            base_type = self.registry.get_complex_type(extension.base)
            if base_type is not None:
                self._visit_complex_type(base_type, path)


class ArrayPathCollector(PathCollector):
    """Collects paths of elements that are emitted as arrays."""

    def __init__(self, registry: TypeRegistry, options: ConvertOptions):
        super().__init__(registry)
        self.options = options

    def matches(self, element: XsdElement, in_sequence: bool, force_array: bool) -> bool:
        return force_array or is_array_element(self.options, element, in_sequence)

    def group_repeats(self, group_ref: XsdGroup, repeats: bool) -> bool:
        return repeats or (
            self.options.treat_unbounded_as_array and group_ref.occurs.is_unbounded
        )


class ListPathCollector(PathCollector):
    """Collects paths of elements whose type is an ``xs:list``."""

    def matches(self, element: XsdElement, in_sequence: bool, force_array: bool) -> bool:
        if element.simple_type is not None and element.simple_type.list_type is not None:
            return True
        if not element.type_name:
            return False
        simple_type = self.registry.get_simple_type(element.type_name)
        return self.resolve_list_type(simple_type) is not None

    def resolve_list_type(self, simple_type: XsdSimpleType | None) -> XsdList | None:
        """Follow a chain of restriction bases to the ``list`` it restricts.

        Args:
            simple_type: The simple type to start from.

        Returns:
            The list definition, or None if the chain ends elsewhere.
        """
        if simple_type is None:
            return None
        if simple_type.list_type is not None:
            return simple_type.list_type

        base = simple_type.restriction.base if simple_type.restriction else None
        base_type = self.registry.get_simple_type(base)
        if base_type is None:
            return None
        with self.stack.entered(DeclarationKind.SIMPLE_TYPE, base) as entered:
            if not entered:
                return None
            return self.resolve_list_type(base_type)
