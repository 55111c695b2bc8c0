"""Compiled schema tree.

A schema is compiled once into a SchemaTree: a flat list of frozen
SchemaNode records linked by index. Index 0 is the synthetic root. The tree
is read-only once parse_schema() returns and can be shared between calls.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from morphkit.core.enums import NodeKind
from morphkit.core.exceptions import SchemaCompilationError
from morphkit.mapping.actions import PreparedAction, classify_action, prepare_action

ROOT_NAME = "MorphismTreeRoot"


@dataclass(frozen=True)
class SchemaNode:
    """One target property of a compiled schema."""

    index: int
    property_name: str
    target_property_path: str
    kind: NodeKind
    action: Any = None
    prepared_action: PreparedAction | None = None
    parent: int | None = None
    children: list[int] = field(default_factory=list)


class SchemaTree:
    """Arena of schema nodes with breadth-first traversal."""

    def __init__(self) -> None:
        root = SchemaNode(
            index=0,
            property_name=ROOT_NAME,
            target_property_path="",
            kind=NodeKind.ROOT,
        )
        self._nodes: list[SchemaNode] = [root]
        self._by_path: dict[str, int] = {}

    @property
    def root(self) -> SchemaNode:
        return self._nodes[0]

    @property
    def nodes(self) -> tuple[SchemaNode, ...]:
        return tuple(self._nodes)

    def __len__(self) -> int:
        """Number of nodes, root excluded."""
        return len(self._nodes) - 1

    def node(self, index: int) -> SchemaNode:
        return self._nodes[index]

    def parent_of(self, node: SchemaNode) -> SchemaNode | None:
        return None if node.parent is None else self._nodes[node.parent]

    def children_of(self, node: SchemaNode) -> list[SchemaNode]:
        return [self._nodes[i] for i in node.children]

    def find(self, target_property_path: str) -> SchemaNode | None:
        """Look up a node by its full target property path."""
        index = self._by_path.get(target_property_path)
        return None if index is None else self._nodes[index]

    def add(self, property_name: str, action: Any, parent: SchemaNode | None = None) -> SchemaNode:
        """Classify ``action`` and add it under ``parent`` (root by default).

        Raises:
            SchemaCompilationError: If the action is invalid or the resulting
                target path already exists.
        """
        parent = parent or self.root
        if parent.kind is NodeKind.ROOT:
            path = property_name
        else:
            path = f"{parent.target_property_path}.{property_name}"

        kind = NodeKind.PROPERTY if action is None else classify_action(action, path)
        if path in self._by_path:
            raise SchemaCompilationError(f"Duplicate target property path '{path}' in schema")

        node = SchemaNode(
            index=len(self._nodes),
            property_name=property_name,
            target_property_path=path,
            kind=kind,
            action=action if kind.is_action else None,
            prepared_action=prepare_action(kind, action, path) if kind.is_action else None,
            parent=parent.index,
        )
        self._nodes.append(node)
        self._by_path[path] = node.index
        parent.children.append(node.index)
        return node

    def traverse_bfs(self) -> Iterator[SchemaNode]:
        """Yield nodes level by level, starting at the root's children."""
        queue: deque[int] = deque(self.root.children)
        while queue:
            node = self._nodes[queue.popleft()]
            queue.extend(node.children)
            yield node


def _entries(partial: Any) -> list[tuple[str, Any]]:
    if isinstance(partial, Mapping):
        return [(str(key), value) for key, value in partial.items()]
    return [(str(index), value) for index, value in enumerate(partial)]


def _seed(tree: SchemaTree, partial: Any, parent: SchemaNode) -> None:
    for name, action in _entries(partial):
        if action is None:
            path = name if parent.kind is NodeKind.ROOT else f"{parent.target_property_path}.{name}"
            raise SchemaCompilationError(f"The action specified for {path} is not supported.")
        node = tree.add(name, action, parent)
        if node.kind is NodeKind.PROPERTY:
            _seed(tree, action, node)


def parse_schema(schema: Mapping[str, Any] | None) -> SchemaTree:
    """Compile a schema mapping into a SchemaTree.

    Raises:
        SchemaCompilationError: If any leaf is empty, unsupported, or two
            leaves resolve to the same target path.
    """
    tree = SchemaTree()
    if schema is None:
        return tree
    if not isinstance(schema, Mapping):
        raise SchemaCompilationError(
            f"A schema must be a mapping. Found {type(schema).__name__}"
        )
    _seed(tree, schema, tree.root)
    return tree
