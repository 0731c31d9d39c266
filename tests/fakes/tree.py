"""Plain-object resource tree for chaining tests, without pydantic or constructs."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from orgchain.models.resource import ResourceKind


class FakeNode:
    """Bare IResourceNode implementation."""

    def __init__(
        self,
        id: str,
        kind: ResourceKind = ResourceKind.UNCHAINED,
        correlation_key: Optional[str] = None,
        depends_on: list[str] | None = None,
    ) -> None:
        self.id = id
        self.kind = kind
        self.correlation_key = correlation_key
        self.depends_on = list(depends_on or [])
        self.parent_id: str | None = None
        self.creation_order = -1

    def has_dependency(self, target_id: str) -> bool:
        return target_id in self.depends_on

    def add_dependency(self, target_id: str) -> bool:
        if target_id in self.depends_on:
            return False
        self.depends_on.append(target_id)
        return True


class FakeTree:
    """Dict-backed IResourceTree."""

    def __init__(self) -> None:
        self._nodes: dict[str, FakeNode] = {}
        self._children: dict[str | None, list[FakeNode]] = {None: []}

    def add(self, node: FakeNode, parent: FakeNode | None = None, order: int | None = None) -> FakeNode:
        node.parent_id = parent.id if parent is not None else None
        node.creation_order = len(self._nodes) if order is None else order
        self._nodes[node.id] = node
        self._children[node.id] = []
        self._children[node.parent_id].append(node)
        return node

    def __getitem__(self, node_id: str) -> FakeNode:
        return self._nodes[node_id]

    def roots(self) -> list[FakeNode]:
        return list(self._children[None])

    def children_of(self, node: FakeNode) -> list[FakeNode]:
        return list(self._children[node.id])

    def nodes(self) -> Iterator[FakeNode]:
        return iter(self._nodes.values())

    def dependency_graph(self) -> dict[str, list[str]]:
        return {n.id: list(n.depends_on) for n in self._nodes.values()}


def build_tree(spec: dict[str, Any], tree: FakeTree | None = None, parent: FakeNode | None = None) -> FakeTree:
    """Build a FakeTree from nested ``{id: (kind, correlation_key, children)}`` entries.

    Entries are added in dict order, which becomes creation order.
    """
    if tree is None:
        tree = FakeTree()
    for node_id, (kind, correlation_key, children) in spec.items():
        node = tree.add(FakeNode(node_id, kind, correlation_key), parent)
        build_tree(children, tree, node)
    return tree
