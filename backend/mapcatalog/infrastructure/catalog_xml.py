"""Catalog XML Adapter: parses catalog markup into CatalogNode trees.

Invariants:
    - Parsing goes through defusedxml: entity expansion and external DTDs are refused
    - Malformed or forbidden markup raises CatalogParseError, never a raw parser error
    - Node kind comes from the element's local tag name (namespace prefix ignored)
    - set_attribute writes through to the underlying element, so to_xml() shows ids

Design Decisions:
    - Wrapper nodes built once at parse time: ElementTree elements have no parent
      pointer, the wrapper holds it
"""

import logging
from xml.etree.ElementTree import Element, tostring

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from mapcatalog.core.domain_types import NodeKind
from mapcatalog.core.errors import CatalogParseError, ErrorContext

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class XmlCatalogNode:
    """CatalogNode implementation over an ElementTree element."""

    def __init__(self, element: Element, parent: "XmlCatalogNode | None" = None):
        self._element = element
        self._parent = parent
        self._kind = NodeKind.from_tag(_local_name(element.tag))
        self._children = tuple(XmlCatalogNode(child, self) for child in element)

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def tag(self) -> str:
        return _local_name(self._element.tag)

    @property
    def children(self) -> tuple["XmlCatalogNode", ...]:
        return self._children

    @property
    def parent(self) -> "XmlCatalogNode | None":
        return self._parent

    @property
    def element(self) -> Element:
        return self._element

    def get_attribute(self, name: str) -> str | None:
        return self._element.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self._element.set(name, value)

    def to_xml(self) -> str:
        return tostring(self._element, encoding="unicode")

    def __repr__(self) -> str:
        return f"XmlCatalogNode(tag={self.tag!r}, children={len(self._children)})"


def parse_catalog_xml(text: str | bytes) -> XmlCatalogNode:
    """Parse catalog markup and return the root node."""
    try:
        root = fromstring(text)
    except ParseError as exc:
        logger.warning(f"Catalog XML parse failed: {exc}")
        raise CatalogParseError(
            str(exc), ErrorContext(debug_info={"position": getattr(exc, "position", None)}),
        ) from exc
    except DefusedXmlException as exc:
        logger.warning(f"Catalog XML rejected: {exc}")
        raise CatalogParseError(
            "forbidden XML construct",
            ErrorContext(debug_info={"reason": type(exc).__name__}),
        ) from exc
    return XmlCatalogNode(root)
