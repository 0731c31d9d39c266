"""Chain builder and idempotency guard."""

from __future__ import annotations

import logging
from typing import Sequence

from orgchain.core.protocols import IResourceNode

logger = logging.getLogger(__name__)


def has_edge(node: IResourceNode, target_id: str) -> bool:
    """True if ``node`` already depends on ``target_id``."""
    return node.has_dependency(target_id)


def chain_group(nodes: Sequence[IResourceNode]) -> int:
    """Make each node depend on its predecessor. Returns the number of edges added.

    ``nodes`` must already be in creation order; groups of fewer than two
    nodes are left untouched.
    """
    added = 0
    for previous, current in zip(nodes, nodes[1:]):
        if has_edge(current, previous.id):
            continue
        current.add_dependency(previous.id)
        logger.debug("Chained %s -> %s", current.id, previous.id)
        added += 1
    return added
