"""Resource tree container owned by the tree-construction collaborators."""

from __future__ import annotations

import logging
from typing import Iterator

from orgchain.core.exceptions import DuplicateNodeError, UnknownNodeError
from orgchain.core.types import DependencyGraph
from orgchain.graph.validation import assert_acyclic
from orgchain.models.resource import ResourceNode

logger = logging.getLogger(__name__)


class ResourceTree:
    """Owns resource nodes by id and records parent/child structure.

    Creation order is a single counter across the whole tree, so it orders
    siblings and also nodes that share a correlation key under different
    parents.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, ResourceNode] = {}
        self._children: dict[str | None, list[ResourceNode]] = {None: []}
        self._next_order = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    # ---- construction ----

    def add(self, node: ResourceNode, parent: ResourceNode | None = None) -> ResourceNode:
        """Add ``node`` under ``parent`` (a root when None) and stamp its creation order."""
        if node.id in self._nodes:
            raise DuplicateNodeError(node.id)
        parent_id = parent.id if parent is not None else None
        if parent_id is not None and parent_id not in self._nodes:
            raise UnknownNodeError(parent_id)

        node.attach(parent_id, self._next_order)
        self._next_order += 1
        self._nodes[node.id] = node
        self._children[node.id] = []
        self._children[parent_id].append(node)
        logger.debug("Added %s node %s under %s", node.kind, node.id, parent_id)
        return node

    def add_dependency(self, node: ResourceNode, target: ResourceNode) -> bool:
        """Record that ``node`` must wait for ``target``."""
        for member in (node, target):
            if member.id not in self._nodes:
                raise UnknownNodeError(member.id)
        return node.add_dependency(target.id)

    # ---- access ----

    def get(self, node_id: str) -> ResourceNode:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def roots(self) -> list[ResourceNode]:
        return list(self._children[None])

    def children_of(self, node: ResourceNode) -> list[ResourceNode]:
        if node.id not in self._nodes:
            raise UnknownNodeError(node.id)
        return list(self._children[node.id])

    def nodes(self) -> Iterator[ResourceNode]:
        """All nodes in creation order."""
        return iter(self._nodes.values())

    def dependency_graph(self) -> DependencyGraph:
        """Snapshot of every node's ``depends_on`` edges, keyed by node id."""
        return {node.id: list(node.depends_on) for node in self._nodes.values()}

    def validate(self) -> None:
        """Raise if any edge dangles or the dependency relation has a cycle."""
        for node in self._nodes.values():
            for target_id in node.depends_on:
                if target_id not in self._nodes:
                    raise UnknownNodeError(target_id)
        assert_acyclic(self.dependency_graph())
