"""Abstract base classes for renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from TreeLists.models import Node, PathTree


class Renderer(ABC):
    """Receives highlight commands for single nodes."""

    @abstractmethod
    def mark_active(self, node: Node) -> None:
        """Highlight exactly this node. Must be idempotent."""

    @abstractmethod
    def mark_inactive(self, node: Node) -> None:
        """Remove the highlight from exactly this node. Must be idempotent."""


class MarkingRenderer(Renderer):
    """Renderer that remembers the highlighted paths and draws a whole tree."""

    def __init__(self, active_paths: Iterable[str] = ()) -> None:
        self.active_paths: set[str] = set(active_paths)

    def mark_active(self, node: Node) -> None:
        self.active_paths.add(node.path)

    def mark_inactive(self, node: Node) -> None:
        self.active_paths.discard(node.path)

    def is_active(self, node: Node) -> bool:
        return node.path in self.active_paths

    @abstractmethod
    def render(self, tree: PathTree) -> str:
        """Return the display representation of the tree."""
