"""Data classes for TreeLists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

DEFAULT_DELIMITER = "|"


class TreeError(Exception):
    """Base class for tree construction and selection errors."""


class DuplicateRootError(TreeError):
    """Raised when a root with the same segment name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate root: {name}")


class DuplicateChildError(TreeError):
    """Raised when a parent already has a child with the same segment name."""

    def __init__(self, parent_path: str, name: str):
        self.parent_path = parent_path
        self.name = name
        super().__init__(f"Duplicate child {name!r} under {parent_path!r}")


@dataclass
class Record:
    name: str
    count: int = 0


@dataclass(eq=False)
class Node:
    """One segment of a qualified path.

    Nodes compare by identity; ``path`` is the unique key inside a tree.
    """

    name: str
    path: str
    count: int = 0
    children: dict[str, Node] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.count})"

    def add_child(self, name: str, count: int, path: str) -> Node:
        if name in self.children:
            raise DuplicateChildError(self.path, name)
        child = Node(name=name, path=path, count=count)
        self.children[name] = child
        return child

    def get_child(self, name: str) -> Node | None:
        return self.children.get(name)


@dataclass
class PathTree:
    """Forest of root nodes keyed by their segment name."""

    roots: dict[str, Node] = field(default_factory=dict)

    def create_root(self, name: str, count: int, path: str) -> Node:
        if name in self.roots:
            raise DuplicateRootError(name)
        root = Node(name=name, path=path, count=count)
        self.roots[name] = root
        return root

    def get_root(self, name: str) -> Node | None:
        return self.roots.get(name)

    def walk(self) -> Iterator[list[Node]]:
        """Yield the chain ``[root, ..., node]`` of every node, depth first."""
        stack = [[root] for root in reversed(list(self.roots.values()))]
        while stack:
            chain = stack.pop()
            yield chain
            for child in reversed(list(chain[-1].children.values())):
                stack.append(chain + [child])

    def find(self, path: str) -> Node | None:
        for chain in self.walk():
            if chain[-1].path == path:
                return chain[-1]
        return None

    def chain_to(self, node: Node) -> list[Node] | None:
        """Return ``[root, ..., node]`` for a node of this tree, else None."""
        for chain in self.walk():
            if chain[-1] is node:
                return chain
        return None

    def __iter__(self) -> Iterator[Node]:
        return iter(self.roots.values())

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Active:
    node: Node


SelectionState = Union[Idle, Active]
