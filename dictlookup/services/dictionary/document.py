"""Thin query layer over BeautifulSoup used by the page extractors.

Extractors only see ``Node`` objects, so they can be exercised against
fixture strings without any network access.
"""

from bs4 import BeautifulSoup, Comment, NavigableString, Tag


class Node:
    """A matched element (or the whole document)."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def select(self, selector: str) -> list["Node"]:
        return [Node(tag) for tag in self._tag.select(selector)]

    def select_one(self, selector: str) -> "Node | None":
        tag = self._tag.select_one(selector)
        return Node(tag) if tag is not None else None

    def select_text(self, selector: str) -> str:
        """Concatenated text of every match, stripped; empty if nothing matches."""
        return "".join(node.raw_text() for node in self.select(selector)).strip()

    def closest(self, selector: str) -> "Node | None":
        """Nearest ancestor matching ``selector`` (the node itself excluded)."""
        parent = self._tag.parent
        if not isinstance(parent, Tag):
            return None
        tag = parent.css.closest(selector)
        return Node(tag) if tag is not None else None

    def raw_text(self) -> str:
        return self._tag.get_text()

    def text(self) -> str:
        return self._tag.get_text().strip()

    def attr(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def split_on_breaks(self) -> list[str]:
        """Split the node's text at ``<br>`` elements, markup stripped.

        Breaks nested anywhere below the node count. Returns a single part
        when there is no line break element.
        """
        parts = [""]
        for descendant in self._tag.descendants:
            if isinstance(descendant, Tag) and descendant.name == "br":
                parts.append("")
            elif isinstance(descendant, NavigableString) and not isinstance(descendant, Comment):
                parts[-1] += str(descendant)
        return [part.strip() for part in parts]


def parse_html(html: str) -> Node:
    """Parse an HTML document into a queryable root node."""
    return Node(BeautifulSoup(html, "html.parser"))
