"""Deterministic depth-first traversal of a resource tree."""

from __future__ import annotations

from typing import Iterator

from orgchain.core.protocols import IResourceNode, IResourceTree


def _ordered(nodes: list[IResourceNode]) -> list[IResourceNode]:
    return sorted(nodes, key=lambda n: n.creation_order)


def walk(tree: IResourceTree) -> Iterator[tuple[IResourceNode, tuple[IResourceNode, ...]]]:
    """Yield every node once as ``(node, ancestors)``, root first.

    Parents are visited before their children and siblings in creation
    order, so a parent's whole child list is available when it is visited.
    An empty tree yields nothing.
    """
    stack: list[tuple[IResourceNode, tuple[IResourceNode, ...]]] = [
        (root, ()) for root in reversed(_ordered(tree.roots()))
    ]
    while stack:
        node, ancestors = stack.pop()
        yield node, ancestors
        lineage = ancestors + (node,)
        for child in reversed(_ordered(tree.children_of(node))):
            stack.append((child, lineage))


def walk_parents(tree: IResourceTree) -> Iterator[tuple[IResourceNode | None, list[IResourceNode]]]:
    """Yield ``(parent, children)`` for every sibling set in the tree.

    Top-level nodes come first, as the children of a ``None`` parent, then
    every node that has children, in walk order.
    """
    roots = _ordered(tree.roots())
    if roots:
        yield None, roots
    for node, _ in walk(tree):
        children = _ordered(tree.children_of(node))
        if children:
            yield node, children
