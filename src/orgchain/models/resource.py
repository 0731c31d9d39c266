"""Resource node model and the chainable kind table."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr


class ResourceKind(StrEnum):
    ACCOUNT_CREATION = "account-creation"
    ORGANIZATIONAL_UNIT_CREATION = "organizational-unit-creation"
    POLICY_ATTACHMENT = "policy-attachment"
    DELEGATED_ADMINISTRATOR = "delegated-administrator"
    POLICY_TYPE_ENABLEMENT = "policy-type-enablement"
    UNCHAINED = "unchained"


class GroupingScope(StrEnum):
    PARENT = "parent"  # all siblings of the kind under one parent
    CORRELATION = "correlation"  # siblings sharing a correlation key


# Extend only by adding kinds.
KIND_SCOPES: dict[ResourceKind, GroupingScope] = {
    ResourceKind.ACCOUNT_CREATION: GroupingScope.PARENT,
    ResourceKind.ORGANIZATIONAL_UNIT_CREATION: GroupingScope.PARENT,
    ResourceKind.POLICY_ATTACHMENT: GroupingScope.CORRELATION,
    ResourceKind.DELEGATED_ADMINISTRATOR: GroupingScope.CORRELATION,
    ResourceKind.POLICY_TYPE_ENABLEMENT: GroupingScope.CORRELATION,
}

CHAINABLE_KINDS: frozenset[ResourceKind] = frozenset(KIND_SCOPES)


class ResourceNode(BaseModel):
    """A single provisionable entity in the resource tree.

    ``parent_id`` and ``creation_order`` are stamped exactly once, by the
    owning tree, when the node is added. ``depends_on`` behaves as an
    insertion-ordered set: entries are appended, never removed or reordered.
    """

    id: str = Field(frozen=True)
    kind: ResourceKind = Field(default=ResourceKind.UNCHAINED, frozen=True)
    correlation_key: Optional[str] = Field(default=None, frozen=True)
    resource_type: str = ""
    properties: dict[str, Any] = Field(default_factory=dict)
    depends_on: list[str] = Field(default_factory=list)

    _parent_id: Optional[str] = PrivateAttr(default=None)
    _creation_order: Optional[int] = PrivateAttr(default=None)

    @property
    def parent_id(self) -> str | None:
        return self._parent_id

    @property
    def creation_order(self) -> int:
        if self._creation_order is None:
            raise RuntimeError(f"Node {self.id!r} has not been added to a tree")
        return self._creation_order

    @property
    def is_attached(self) -> bool:
        return self._creation_order is not None

    def attach(self, parent_id: str | None, creation_order: int) -> None:
        """Stamp parentage and creation order. Called once by the owning tree."""
        if self._creation_order is not None:
            raise RuntimeError(f"Node {self.id!r} is already attached to a tree")
        self._parent_id = parent_id
        self._creation_order = creation_order

    def has_dependency(self, target_id: str) -> bool:
        return target_id in self.depends_on

    def add_dependency(self, target_id: str) -> bool:
        """Append ``target_id`` unless present. Returns True if an edge was added."""
        if target_id in self.depends_on:
            return False
        self.depends_on.append(target_id)
        return True
