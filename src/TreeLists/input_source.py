"""Resolve click events to tree nodes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from TreeLists.models import Node, PathTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClickEvent:
    handle: str | None = None  # qualified path of the clicked node


class InputSource:
    """Deliver clicks that resolve to a node to every subscriber.

    Clicks on anything else (empty handle, unknown path) are dropped.
    """

    def __init__(self, tree: PathTree):
        self.tree = tree
        self._subscribers: list[Callable[[Node], None]] = []

    def subscribe(self, callback: Callable[[Node], None]) -> None:
        self._subscribers.append(callback)

    def resolve(self, event: ClickEvent) -> Node | None:
        if not event.handle:
            return None
        return self.tree.find(event.handle)

    def dispatch(self, event: ClickEvent) -> bool:
        """Return True if the click reached the subscribers."""
        node = self.resolve(event)
        if node is None:
            logger.debug("Ignoring click on %r", event.handle)
            return False

        logger.info("Clicked %s", node.path)
        for callback in self._subscribers:
            callback(node)
        return True
