"""Partition siblings into chain groups by kind and correlation key."""

from __future__ import annotations

from typing import Iterable, Union

from orgchain.core.config import ChainingConfig
from orgchain.core.exceptions import MissingCorrelationKeyError
from orgchain.core.protocols import IResourceNode
from orgchain.models.resource import KIND_SCOPES, GroupingScope, ResourceKind

# ``kind`` for parent-scoped kinds, ``(kind, correlation_key)`` otherwise
GroupKey = Union[ResourceKind, tuple[ResourceKind, str]]


def group_key(node: IResourceNode) -> GroupKey:
    """Return the group key of a chainable node.

    Raises:
        MissingCorrelationKeyError: correlation-scoped node with no key.
    """
    if KIND_SCOPES[node.kind] is GroupingScope.PARENT:
        return node.kind
    if not node.correlation_key:
        raise MissingCorrelationKeyError(node.id, node.kind)
    return (node.kind, node.correlation_key)


def group_siblings(
    children: Iterable[IResourceNode], config: ChainingConfig | None = None
) -> dict[GroupKey, list[IResourceNode]]:
    """Group the direct children of one parent.

    Unchained kinds, and kinds not enabled in ``config``, are dropped.
    Groups and their members keep creation order.
    """
    if config is None:
        config = ChainingConfig()

    groups: dict[GroupKey, list[IResourceNode]] = {}
    for child in sorted(children, key=lambda n: n.creation_order):
        if child.kind not in KIND_SCOPES or not config.is_chainable(child.kind):
            continue
        groups.setdefault(group_key(child), []).append(child)
    return groups


class CorrelationIndex:
    """Tree-wide index of correlation-scoped nodes.

    Policy attachments are children of their policy but are grouped by the
    target they attach to, so these groups cut across tree parents. Keys are
    ``(kind, correlation_key)`` over the whole tree.
    """

    def __init__(self) -> None:
        self._groups: dict[tuple[ResourceKind, str], list[IResourceNode]] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def add(self, node: IResourceNode) -> None:
        key = group_key(node)
        if not isinstance(key, tuple):
            raise ValueError(f"Node {node.id!r} of kind {node.kind!r} is parent-scoped")
        self._groups.setdefault(key, []).append(node)

    def groups(self) -> list[list[IResourceNode]]:
        """Groups in order of their earliest member, members in creation order."""
        ordered = [sorted(members, key=lambda n: n.creation_order) for members in self._groups.values()]
        return sorted(ordered, key=lambda members: members[0].creation_order)
