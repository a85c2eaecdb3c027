"""Element lookups used by the GPX mapper.

Documents are parsed with defusedxml, which returns plain
``xml.etree.ElementTree`` elements. Tag lookups resolve in the namespace of
the element being queried, so a document declaring the GPX 1.1 default
namespace maps the same way as one without any namespace.
"""

from typing import Optional, Union
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET


def load_root(data: Union[str, bytes]) -> Element:
    """Parse a complete XML document and return its root element.

    Malformed XML raises ``xml.etree.ElementTree.ParseError`` unchanged.
    """
    return ET.fromstring(data)


def namespace_of(elem: Element) -> str:
    """Return the ``{uri}`` prefix of an element's tag, or "" if it has none."""
    tag = elem.tag
    if tag.startswith("{"):
        return tag.split("}")[0] + "}"
    return ""


def local_name(elem: Element) -> str:
    return elem.tag.rsplit("}", 1)[-1]


def attr(elem: Element, name: str) -> str:
    return elem.get(name, "")


def child(elem: Element, tag: str) -> Optional[Element]:
    """First direct child with the given tag, or None."""
    return elem.find(namespace_of(elem) + tag)


def children(elem: Element, tag: str) -> list[Element]:
    """All direct children with the given tag, in document order."""
    return elem.findall(namespace_of(elem) + tag)


def inner_text(elem: Element) -> str:
    return "".join(elem.itertext()).strip()


def child_text(elem: Element, tag: str) -> str:
    node = child(elem, tag)
    if node is None:
        return ""
    return inner_text(node)
