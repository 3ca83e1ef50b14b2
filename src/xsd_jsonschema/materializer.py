"""Parse XML instance documents into dicts shaped by an XSD.

The derived array and list paths are applied regardless of how many
instances a given document contains: an array path is always a list, and
a list path is always split into tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from xsd_jsonschema.converter import OptionsArg, derive_array_paths, derive_list_paths
from xsd_jsonschema.model import XsdDocument
from xsd_jsonschema.options import ConvertOptions
from xsd_jsonschema.parser import XmlSource, XmlTreeBuilder, load_xml


@dataclass
class XmlParseOptions:
    """Options for :func:`parse_xml`.

    Attributes:
        array_element_names: Tag names always parsed as lists. Only used
            when neither ``xsd`` nor ``array_element_paths`` is given.
        array_element_paths: Dot paths always parsed as lists.
        list_element_paths: Dot paths whose text is split into tokens.
        treat_unbounded_as_array: Array policy used with ``xsd`` when
            ``convert_options`` is not given.
        xsd: Parsed XSD to derive array and list paths from.
        convert_options: Array policy used with ``xsd``.
        parse_tag_value: Parse element text into bools and numbers.
        parse_attribute_value: Parse attribute values into bools and numbers.
    """

    array_element_names: tuple[str, ...] = ()
    array_element_paths: tuple[str, ...] | None = None
    list_element_paths: tuple[str, ...] | None = None
    treat_unbounded_as_array: bool = False
    xsd: XsdDocument | None = None
    convert_options: OptionsArg = None
    parse_tag_value: bool = True
    parse_attribute_value: bool = True

    def resolve_array_paths(self) -> set[str]:
        if self.array_element_paths is not None:
            return set(self.array_element_paths)
        if self.xsd is not None:
            options = self.convert_options
            if options is None:
                options = ConvertOptions(
                    array_element_names=self.array_element_names,
                    treat_unbounded_as_array=self.treat_unbounded_as_array,
                )
            return derive_array_paths(self.xsd, options)
        return set()

    def resolve_array_names(self, array_paths: set[str]) -> set[str]:
        if self.xsd is not None or array_paths:
            return set()
        if self.array_element_names:
            return set(self.array_element_names)
        if self.convert_options is not None:
            return set(ConvertOptions.resolve(self.convert_options).array_element_names)
        return set()

    def resolve_list_paths(self) -> set[str]:
        if self.list_element_paths is not None:
            return set(self.list_element_paths)
        if self.xsd is not None:
            return derive_list_paths(self.xsd)
        return set()


def create_tree_builder(options: XmlParseOptions | None = None) -> XmlTreeBuilder:
    """Create a tree builder configured from parse options."""
    options = options or XmlParseOptions()
    array_paths = options.resolve_array_paths()
    array_names = options.resolve_array_names(array_paths)

    def is_array(tag_name: str, path: str) -> bool:
        return tag_name in array_names or path in array_paths

    return XmlTreeBuilder(
        parse_tag_value=options.parse_tag_value,
        parse_attribute_value=options.parse_attribute_value,
        is_array=is_array,
        list_paths=frozenset(options.resolve_list_paths()),
    )


def parse_xml(source: XmlSource, options: XmlParseOptions | None = None) -> dict[str, Any]:
    """Parse an XML instance document into a dict.

    Args:
        source: XML text, bytes, or a Path to an XML file.
        options: Array and list shaping options.

    Returns:
        ``{root_name: value}`` where attributes are ``@_``-prefixed keys and
        text next to attributes or children is stored under ``#text``.

    Raises:
        XsdParseError: If the content is not well-formed XML.

    Example:
        document = parse_xsd(Path("order.xsd"))
        data = parse_xml(
            Path("order.xml"),
            XmlParseOptions(xsd=document, treat_unbounded_as_array=True),
        )
    """
    return create_tree_builder(options).build(load_xml(source))
