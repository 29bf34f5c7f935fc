"""Single-selection state machine that highlights the ancestor chain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from TreeLists.models import Active, Idle, Node, PathTree, SelectionState, TreeError
from TreeLists.renderers.base import Renderer

if TYPE_CHECKING:
    from TreeLists.input_source import InputSource

logger = logging.getLogger(__name__)


class InvalidNodeReferenceError(TreeError):
    """Raised when a selected object is not a node of the controller's tree."""


class SelectionController:
    """Track at most one activated node.

    Activating a node highlights the node and every ancestor up to its
    top-level root. Re-selecting the activated node toggles it off;
    selecting another node first clears the old chain completely and then
    highlights the new one, so ancestors shared by both chains stay lit.
    """

    def __init__(self, tree: PathTree, renderer: Renderer):
        self.tree = tree
        self.renderer = renderer
        self._state: SelectionState = Idle()

    @property
    def state(self) -> SelectionState:
        return self._state

    def get_activated(self) -> Node | None:
        if isinstance(self._state, Active):
            return self._state.node
        return None

    def ancestor_chain(self, node: Node) -> list[Node]:
        """Return ``[node, parent, ..., root]``; its length is the node's depth."""
        if not isinstance(node, Node):
            raise InvalidNodeReferenceError(f"Not a node: {node!r}")
        chain = self.tree.chain_to(node)
        if chain is None:
            raise InvalidNodeReferenceError(f"Node {node.path!r} is not part of this tree.")
        return list(reversed(chain))

    def select(self, node: Node | None) -> None:
        if node is None:
            return
        chain = self.ancestor_chain(node)

        current = self.get_activated()
        if current is not None:
            self._unmark(self.ancestor_chain(current))
            self._state = Idle()
            if current is node:
                logger.info("Deactivated %s", node.path)
                return

        marked: list[Node] = []
        try:
            for item in chain:
                self.renderer.mark_active(item)
                marked.append(item)
        except Exception:
            # stay Idle with nothing highlighted
            self._unmark(marked)
            raise
        self._state = Active(node)
        logger.info("Activated %s", node.path)

    def clear(self) -> None:
        current = self.get_activated()
        if current is None:
            return
        self._unmark(self.ancestor_chain(current))
        self._state = Idle()
        logger.info("Deactivated %s", current.path)

    def attach(self, source: InputSource) -> None:
        """Route resolved clicks from ``source`` to :meth:`select`."""
        source.subscribe(self.select)

    def _unmark(self, chain: list[Node]) -> None:
        for item in chain:
            self.renderer.mark_inactive(item)
