"""ASCII tree renderer."""

from __future__ import annotations

from TreeLists.models import Node, PathTree
from TreeLists.renderers.base import MarkingRenderer

ACTIVE_MARK = " *"


class TextRenderer(MarkingRenderer):
    """Render the forest as an ASCII tree.

    Example output (``Bútor`` activated):
        └── Lakberendezés (38) *
            ├── Bútor (37) *
            └── Világítás (1)
    """

    def render(self, tree: PathTree) -> str:
        lines: list[str] = []
        self._render_nodes(list(tree), lines, prefix="")
        return "\n".join(lines)

    def _render_nodes(self, nodes: list[Node], lines: list[str], prefix: str) -> None:
        for i, node in enumerate(nodes):
            is_last = i == len(nodes) - 1
            connector = "└── " if is_last else "├── "
            mark = ACTIVE_MARK if self.is_active(node) else ""
            lines.append(f"{prefix}{connector}{node.label}{mark}")

            if node.children:
                extension = "    " if is_last else "│   "
                self._render_nodes(
                    list(node.children.values()), lines, prefix + extension
                )
