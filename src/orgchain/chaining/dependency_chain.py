"""Sibling dependency-chaining pass.

Runs once per synthesis, after the tree and all collaborator edges are
final and before serialization. Rate-limited sibling groups become total
orders: each member depends on the previously created member of its group.
"""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from pydantic import BaseModel

from orgchain.chaining.builder import chain_group
from orgchain.chaining.grouper import CorrelationIndex, group_siblings
from orgchain.chaining.walker import walk_parents
from orgchain.core.config import AppSettings, ChainingConfig
from orgchain.core.protocols import IResourceNode, IResourceTree

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=IResourceTree)


class ChainReport(BaseModel):
    """Summary of one chaining pass."""

    groups_found: int = 0
    groups_chained: int = 0
    edges_added: int = 0


class DependencyChain:
    """Injects ordering edges between chainable siblings of a resource tree."""

    def __init__(self, *, config: ChainingConfig | None = None) -> None:
        self._config = config if config is not None else ChainingConfig()

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> DependencyChain:
        if settings is None:
            settings = AppSettings()
        return cls(config=settings.chaining)

    def collect_groups(self, tree: IResourceTree) -> list[list[IResourceNode]]:
        """Compute every chain group without mutating the tree.

        Raises:
            MissingCorrelationKeyError: a chainable node lacks its correlation key.
        """
        parent_groups: list[list[IResourceNode]] = []
        index = CorrelationIndex()

        for _, children in walk_parents(tree):
            for key, members in group_siblings(children, self._config).items():
                if isinstance(key, tuple):
                    for member in members:
                        index.add(member)
                else:
                    parent_groups.append(members)

        return parent_groups + index.groups()

    def apply(self, tree: IResourceTree) -> ChainReport:
        """Chain ``tree`` in place. Either every group is chained or nothing is."""
        report = ChainReport()
        if not self._config.enabled:
            logger.info("Dependency chaining disabled; tree left unchanged")
            return report

        groups = self.collect_groups(tree)
        report.groups_found = len(groups)
        for members in groups:
            if len(members) < 2:
                continue
            added = chain_group(members)
            report.groups_chained += 1
            report.edges_added += added
            _log_group(members, added)

        logger.info(
            "Dependency chaining complete: %d groups, %d chained, %d edges added",
            report.groups_found, report.groups_chained, report.edges_added,
        )
        return report


def _log_group(members: Sequence[IResourceNode], added: int) -> None:
    logger.debug(
        "Chained %d %s nodes (%d new edges): %s",
        len(members), members[0].kind, added, " -> ".join(m.id for m in members),
    )


def chain(tree: T, settings: AppSettings | None = None) -> T:
    """Apply the dependency-chaining pass to ``tree`` and return it."""
    DependencyChain.from_settings(settings).apply(tree)
    return tree
