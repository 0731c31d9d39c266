"""Type aliases used across OrgChain."""

from __future__ import annotations

NodeId = str
DependencyGraph = dict[NodeId, list[NodeId]]
