"""XML-to-dict conversion built on lxml.

Produces the dict tree consumed by :meth:`XsdDocument.from_dict` and by the
XML materializer: namespace prefixes are stripped from tag and attribute
names, attributes become ``@_<name>`` keys, mixed text becomes ``#text``,
and repeated sibling tags become lists.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable, Union

from lxml import etree

from xsd_jsonschema.errors import XsdParseError
from xsd_jsonschema.model import ATTRIBUTE_PREFIX, XsdDocument

XmlSource = Union[str, bytes, Path]

TEXT_KEY = "#text"

_INTEGER_PATTERN = re.compile(r"^[-+]?\d+$")
_DECIMAL_PATTERN = re.compile(r"^[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?$")


def parse_scalar(text: str) -> Any:
    """Parse a trimmed text value into a bool, int or float where possible."""
    if text == "true":
        return True
    if text == "false":
        return False
    if _INTEGER_PATTERN.match(text):
        return int(text)
    if _DECIMAL_PATTERN.match(text):
        return float(text)
    return text


def local_name(name: str) -> str:
    """Strip the namespace from a Clark-notation or prefixed name."""
    if name.startswith("{"):
        name = name.split("}", 1)[1]
    return name.rsplit(":", 1)[-1]


def load_xml(source: XmlSource) -> etree._Element:
    """Parse XML text, bytes, or a file path into an lxml element.

    Raises:
        XsdParseError: If the content is not well-formed XML.
    """
    encoding = None
    if isinstance(source, Path):
        content = source.read_bytes()
    elif isinstance(source, str):
        # Text is already decoded; override any declared encoding.
        content = source.encode("utf-8")
        encoding = "utf-8"
    else:
        content = source
    parser = etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )

    try:
        return etree.fromstring(content, parser)
    except etree.XMLSyntaxError as exc:
        raise XsdParseError(f"XML parse error: {exc}", line=exc.lineno) from exc


class XmlTreeBuilder:
    """Convert an lxml element tree into nested dicts.

    Args:
        parse_tag_value: Parse element text with :func:`parse_scalar`.
        parse_attribute_value: Parse attribute values with :func:`parse_scalar`.
        is_array: Called with ``(tag_name, path)``; True forces the element
            into a list even when it occurs once.
        list_paths: Paths whose text is split on whitespace into tokens.
    """

    def __init__(
        self,
        parse_tag_value: bool = False,
        parse_attribute_value: bool = False,
        is_array: Callable[[str, str], bool] | None = None,
        list_paths: set[str] | frozenset[str] = frozenset(),
    ):
        self.parse_tag_value = parse_tag_value
        self.parse_attribute_value = parse_attribute_value
        self.is_array = is_array
        self.list_paths = list_paths

    def build(self, root: etree._Element) -> dict[str, Any]:
        name = local_name(root.tag)
        return {name: self._convert(root, name)}

    def _convert(self, element: etree._Element, path: str) -> Any:
        result: dict[str, Any] = {}
        list_keys: set[str] = set()

        for attr_name, attr_value in element.attrib.items():
            value = parse_scalar(attr_value.strip()) if self.parse_attribute_value else attr_value
            result[f"{ATTRIBUTE_PREFIX}{local_name(attr_name)}"] = value

        text_parts = [element.text or ""]
        for child in element:
            text_parts.append(child.tail or "")
            if not isinstance(child.tag, str):
                continue
            name = local_name(child.tag)
            child_path = f"{path}.{name}"
            value = self._convert(child, child_path)

            if name in list_keys:
                result[name].append(value)
            elif self.is_array is not None and self.is_array(name, child_path):
                result[name] = [value]
                list_keys.add(name)
            elif name in result:
                result[name] = [result[name], value]
                list_keys.add(name)
            else:
                result[name] = value

        text = "".join(text_parts).strip()
        if not result:
            return self._text_value(text, path)
        if text or path in self.list_paths:
            result[TEXT_KEY] = self._text_value(text, path)
        return result

    def _text_value(self, text: str, path: str) -> Any:
        if path in self.list_paths:
            tokens = text.split()
            if self.parse_tag_value:
                return [parse_scalar(token) for token in tokens]
            return tokens
        if self.parse_tag_value and text:
            return parse_scalar(text)
        return text


def xml_to_dict(source: XmlSource) -> dict[str, Any]:
    """Convert XML into a dict tree with string attribute and text values."""
    return XmlTreeBuilder().build(load_xml(source))


def parse_xsd(source: XmlSource) -> XsdDocument:
    """Parse XSD text, bytes, or a file path into the tree model.

    Args:
        source: The XSD content, or a Path to an XSD file.

    Returns:
        The parsed document. Its ``schema`` is None when the root element
        is not a schema.

    Raises:
        XsdParseError: If the content is not well-formed XML.
    """
    return XsdDocument.from_dict(xml_to_dict(source))
