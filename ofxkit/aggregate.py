"""Composition of OFX aggregates in SGML form."""

from __future__ import annotations

from typing import List


class Aggregate:
    """A tagged OFX aggregate holding elements and subordinate aggregates."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self._parts: List[str] = []

    def add(self, tag: str, data: str) -> Aggregate:
        """Add an SGML element, e.g. ``<TAG>data``."""
        self._parts.append(f"<{tag}>{data}\r\n")
        return self

    def add_xml(self, tag: str, data: str) -> Aggregate:
        """Add an element with a closing tag, e.g. ``<TAG>data</TAG>``."""
        self._parts.append(f"<{tag}>{data}</{tag}>\r\n")
        return self

    def add_aggregate(self, sub: Aggregate) -> Aggregate:
        """Add a subordinate aggregate as it stands now."""
        self._parts.append(sub.output())
        return self

    def output(self) -> str:
        """Return the aggregate composed into a string."""
        contents = "".join(self._parts)
        return f"<{self.tag}>\r\n{contents}</{self.tag}>\r\n"

    def __str__(self) -> str:
        return self.output()