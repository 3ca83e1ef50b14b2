"""pytest configuration and fixtures for xsd_jsonschema tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_loader import XML_DIR, XSD_DIR
from xsd_jsonschema import ConvertOptions, XsdDocument, parse_xsd


@pytest.fixture
def order_xsd_path() -> Path:
    """Path to the order schema fixture."""
    return XSD_DIR / "order.xsd"


@pytest.fixture
def order_xml_path() -> Path:
    """Path to a valid single-item order document."""
    return XML_DIR / "order.xml"


@pytest.fixture
def order_xsd(order_xsd_path: Path) -> XsdDocument:
    """Provide the parsed order schema."""
    return parse_xsd(order_xsd_path)


@pytest.fixture
def catalog_xsd() -> XsdDocument:
    """Provide the parsed catalog schema (repeating group, list chain)."""
    return parse_xsd(XSD_DIR / "catalog.xsd")


@pytest.fixture
def tree_xsd() -> XsdDocument:
    """Provide the parsed self-referencing tree schema."""
    return parse_xsd(XSD_DIR / "tree.xsd")


@pytest.fixture
def unbounded_options() -> ConvertOptions:
    """Options treating every unbounded element as an array."""
    return ConvertOptions(treat_unbounded_as_array=True)
