"""Markup tree codec: SVG/XML text <-> Element tree.

Only local names are kept (namespaces are stripped from tags and attributes). Path
data is read from ``Element.attributes["d"]`` and handed to ``parse_path`` as plain
text.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO
from xml.parsers.expat import errors as expat_errors

_NO_ELEMENTS = expat_errors.codes[expat_errors.XML_ERROR_NO_ELEMENTS]


class ElementDecodeError(ValueError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Error decoding element: {detail}")
        self.detail = detail


@dataclass
class Element:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    content: str = ""

    def equal(self, other: Element) -> bool:
        return self == other

    def iter(self, name: str | None = None) -> Iterator[Element]:
        """Depth-first walk over this element and its descendants, in document order."""
        stack = [self]
        while stack:
            element = stack.pop()
            if name is None or element.name == name:
                yield element
            stack.extend(reversed(element.children))


def _strip_ns(name: str) -> str:
    return name.split("}")[-1] if "}" in name else name


def _convert_node(node: ET.Element) -> Element:
    return Element(
        name=_strip_ns(node.tag),
        attributes={_strip_ns(k): v for k, v in node.attrib.items()},
    )


def _from_etree(root: ET.Element) -> Element:
    # Explicit stack: nesting depth is bounded only by the input size.
    top = _convert_node(root)
    stack = [(root, top)]
    while stack:
        node, element = stack.pop()

        # Character data between children belongs to this element; the last
        # non-blank run wins.
        if node.text and node.text.strip():
            element.content = node.text
        for child in node:
            child_element = _convert_node(child)
            element.children.append(child_element)
            stack.append((child, child_element))
            if child.tail and child.tail.strip():
                element.content = child.tail

    return top


def parse_element(source: str | bytes | IO) -> Element | None:
    """Decode the first element of a document (and its subtree).

    Returns None when the document holds no element at all.
    """
    data = source.read() if hasattr(source, "read") else source

    parser = ET.XMLPullParser(events=("start",))
    root: ET.Element | None = None
    try:
        # feed() queues syntax errors; read_events() raises them in order.
        parser.feed(data)
        for _, node in parser.read_events():
            if root is None:
                root = node
        parser.close()
        for _, node in parser.read_events():
            if root is None:
                root = node
    except ET.ParseError as exc:
        if exc.code == _NO_ELEMENTS and root is None:
            return None
        raise ElementDecodeError(str(exc)) from exc

    if root is None:
        return None
    return _from_etree(root)


def _to_etree(root: Element) -> ET.Element:
    top = ET.Element(root.name, dict(root.attributes))
    stack = [(root, top)]
    while stack:
        element, node = stack.pop()
        if element.content:
            node.text = element.content
        for child in element.children:
            child_node = ET.SubElement(node, child.name, dict(child.attributes))
            stack.append((child, child_node))
    return top


def serialize_element(element: Element) -> str:
    """Write an Element tree back to markup."""
    return ET.tostring(_to_etree(element), encoding="unicode")
