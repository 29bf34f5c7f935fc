"""Build a PathTree from flat delimiter-qualified records."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from TreeLists.models import DEFAULT_DELIMITER, Node, PathTree, Record, TreeError

logger = logging.getLogger(__name__)


class MissingAncestorError(TreeError):
    """Raised when a record arrives before one of its ancestors."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Missing ancestor for {path!r}. Every ancestor path must be listed before it."
        )


class RecordFormatError(TreeError):
    """Raised when raw input cannot be turned into records."""


def split_name(name: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    if not delimiter:
        raise ValueError("Delimiter must not be empty.")
    return name.split(delimiter)


def find_parent(tree: PathTree, route: list[str], path: str) -> Node:
    """Return the node that owns ``route[-1]``.

    Walks from root ``route[0]`` through ``route[1:-1]``; ``path`` is only
    used for the error message.
    """
    node = tree.get_root(route[0])
    for segment in route[1:-1]:
        if node is None:
            break
        node = node.get_child(segment)
    if node is None:
        raise MissingAncestorError(path)
    return node


def build_tree(
    records: Iterable[Record],
    delimiter: str = DEFAULT_DELIMITER,
) -> PathTree:
    """Build a forest from records ordered so that ancestors come first.

    Example: ``X``, ``X|Y``, ``X|Y|Z`` gives the single chain X -> Y -> Z.
    Any error aborts the build; no partial tree is returned.
    """
    tree = PathTree()
    total = 0
    for record in records:
        route = split_name(record.name, delimiter)
        if len(route) == 1:
            tree.create_root(route[0], record.count, record.name)
        else:
            parent = find_parent(tree, route, record.name)
            parent.add_child(route[-1], record.count, record.name)
        logger.debug("Inserted %s at depth %d", record.name, len(route))
        total += 1

    logger.info("Built tree with %d roots from %d records", len(tree.roots), total)
    return tree


def parse_records(data: Any) -> list[Record]:
    """Validate JSON-like input: a list of ``{"name": str, "count": int}``."""
    if not isinstance(data, list):
        raise RecordFormatError("Records must be a list of objects.")

    records: list[Record] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise RecordFormatError(f"Record {index} is not an object.")
        name = item.get("name")
        count = item.get("count", 0)
        if not isinstance(name, str) or not name:
            raise RecordFormatError(f"Record {index} has no name.")
        # bool is a subclass of int
        if isinstance(count, bool) or not isinstance(count, int):
            raise RecordFormatError(f"Record {index} ({name}) has a non-integer count.")
        records.append(Record(name=name, count=count))
    return records
