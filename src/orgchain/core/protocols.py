"""Protocol interfaces for the resource tree seen by the chaining pass.

Tree-construction collaborators may supply any objects matching these
Protocols; structural typing, no inheritance required.
"""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, runtime_checkable

from orgchain.models.resource import ResourceKind


# ---------------------------------------------------------------------------
# Resource Node
# ---------------------------------------------------------------------------

@runtime_checkable
class IResourceNode(Protocol):
    """A node with identity, kind, parentage and a mutable edge set."""

    id: str
    kind: ResourceKind
    correlation_key: Optional[str]
    depends_on: list[str]

    @property
    def parent_id(self) -> str | None: ...

    @property
    def creation_order(self) -> int: ...

    def has_dependency(self, target_id: str) -> bool: ...

    def add_dependency(self, target_id: str) -> bool: ...


# ---------------------------------------------------------------------------
# Resource Tree
# ---------------------------------------------------------------------------

@runtime_checkable
class IResourceTree(Protocol):
    """Read access to a fully constructed tree of resource nodes."""

    def roots(self) -> list[IResourceNode]: ...

    def children_of(self, node: IResourceNode) -> list[IResourceNode]: ...

    def nodes(self) -> Iterator[IResourceNode]: ...
