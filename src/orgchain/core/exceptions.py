"""OrgChain exception hierarchy."""

from __future__ import annotations


class OrgChainError(Exception):
    """Base exception for all OrgChain errors."""


class ChainingError(OrgChainError):
    """Error during the sibling dependency-chaining pass."""


class MissingCorrelationKeyError(ChainingError):
    """A correlation-scoped node has no correlation key."""

    def __init__(self, node_id: str, kind: str) -> None:
        self.node_id = node_id
        self.kind = kind
        super().__init__(
            f"Node {node_id!r} of kind {kind!r} requires a correlation key but has none"
        )


class TreeError(OrgChainError):
    """Error during resource tree construction."""


class DuplicateNodeError(TreeError):
    """A node with the same id already exists in the tree."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id!r} already exists in the tree")


class UnknownNodeError(TreeError):
    """A referenced node is not part of the tree."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id!r} is not part of the tree")


class DependencyCycleError(TreeError):
    """The dependency relation contains a cycle."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"Dependency cycle detected: {' -> '.join(cycle)}")


class ServiceAccessNotEnabledError(TreeError):
    """Delegating administration for a service whose access was never enabled."""

    def __init__(self, service: str) -> None:
        self.service = service
        super().__init__(f"AWS service access for {service!r} is not enabled in the organization")
