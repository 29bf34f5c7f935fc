"""Nested HTML list renderer."""

from __future__ import annotations

from html import escape
from typing import Iterable

from TreeLists.models import Node, PathTree
from TreeLists.renderers.base import MarkingRenderer


class HtmlRenderer(MarkingRenderer):
    """Render one ``<ul>`` per root.

    Each node becomes ``<li id="path"><span>name (count)</span>...</li>``,
    with a nested ``<ul>`` for its children. Highlighted items carry
    ``class="active"``; the ``id`` is the click handle.
    """

    def __init__(self, indent: str = "  ", active_paths: Iterable[str] = ()) -> None:
        super().__init__(active_paths)
        self.indent = indent

    def render(self, tree: PathTree) -> str:
        lines: list[str] = []
        for root in tree:
            lines.append("<ul>")
            self._render_item(root, lines, depth=1)
            lines.append("</ul>")
        return "\n".join(lines)

    def _render_item(self, node: Node, lines: list[str], depth: int) -> None:
        pad = self.indent * depth
        css = ' class="active"' if self.is_active(node) else ""
        lines.append(f'{pad}<li id="{escape(node.path)}"{css}>')
        lines.append(f"{pad}{self.indent}<span>{escape(node.label)}</span>")
        if node.children:
            lines.append(f"{pad}{self.indent}<ul>")
            for child in node.children.values():
                self._render_item(child, lines, depth + 2)
            lines.append(f"{pad}{self.indent}</ul>")
        lines.append(f"{pad}</li>")
