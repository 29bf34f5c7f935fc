"""Markdown output assembly."""

from __future__ import annotations

import re
from typing import Iterable

from TreeLists.models import PathTree
from TreeLists.renderers.text import TextRenderer


def code_span(text: str) -> str:
    """Wrap ``text`` in an inline code span that survives embedded backticks.

    The fence is one backtick longer than the longest run inside ``text``;
    padding spaces keep a leading or trailing backtick off the fence.
    """
    runs = re.findall(r"`+", text)
    if not runs:
        return f"`{text}`"
    fence = "`" * (max(len(run) for run in runs) + 1)
    return f"{fence} {text} {fence}"


class MarkdownRenderer(TextRenderer):
    def __init__(self, title: str = "Categories", active_paths: Iterable[str] = ()) -> None:
        super().__init__(active_paths)
        self.title = title

    def render(self, tree: PathTree) -> str:
        """Render the tree as a single Markdown document.

        The structure section reuses the ASCII tree; the paths section lists
        every qualified path with its count, highlighted ones in bold.
        """
        parts: list[str] = []

        # Header
        parts.append(f"# {self.title}\n")

        # Structure
        parts.append("## Structure\n")
        parts.append("```")
        parts.append(super().render(tree))
        parts.append("```\n")

        # Paths
        parts.append("## Paths\n")
        for chain in tree.walk():
            node = chain[-1]
            item = f"{code_span(node.path)} ({node.count})"
            if self.is_active(node):
                item = f"**{item}**"
            parts.append(f"- {item}")

        return "\n".join(parts)
