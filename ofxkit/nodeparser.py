"""Searching XML documents for nodes with a path notation like XPath."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Union


def _name(element: ET.Element) -> str:
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _texts(element: ET.Element) -> List[str]:
    """Return the contents of the text nodes directly under ``element``."""
    texts = [element.text] if element.text is not None else []
    texts.extend(child.tail for child in element if child.tail is not None)
    return texts


class NodeList(list):
    """An ordered list of XML elements that can be narrowed down by path."""

    @classmethod
    def from_root(cls, root: Union[ET.Element, ET.ElementTree]) -> NodeList:
        """Return a list holding the document root element."""
        if isinstance(root, ET.ElementTree):
            root = root.getroot()
        return cls([root])

    @classmethod
    def from_string(cls, text: Union[str, bytes]) -> NodeList:
        """Parse an XML document and return a list holding its root."""
        return cls.from_root(ET.fromstring(text))

    @classmethod
    def _path_from(cls, node: ET.Element, path: str) -> NodeList:
        key, _, remainder = path.partition("/")
        result = cls()
        for child in node:
            if _name(child) != key:
                continue
            if remainder:
                result.extend(cls([child]).path(remainder))
            else:
                result.append(child)
        return result

    def path(self, path: str) -> NodeList:
        """Return the elements reached by ``path``, e.g. ``"SONRS/STATUS"``."""
        result = NodeList()
        for node in self:
            result.extend(self._path_from(node, path))
        return result

    def select(self, key: str, value: str) -> NodeList:
        """Keep the elements having a ``key`` child whose text is ``value``."""
        result = NodeList()
        for node in self:
            for child in node:
                if _name(child) == key and child.text is not None and child.text == value:
                    result.append(node)
        return result

    def text(self) -> List[str]:
        """Return the text content directly under each element.

        An empty string stands alone when no text is found.
        """
        result = [text for node in self for text in _texts(node)]
        return result or [""]