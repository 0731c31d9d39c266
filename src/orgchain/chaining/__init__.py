"""Sibling dependency-chaining pass over resource trees."""

from __future__ import annotations

from orgchain.chaining.builder import chain_group, has_edge
from orgchain.chaining.dependency_chain import ChainReport, DependencyChain, chain
from orgchain.chaining.grouper import CorrelationIndex, group_key, group_siblings
from orgchain.chaining.walker import walk, walk_parents

__all__ = [
    "ChainReport",
    "CorrelationIndex",
    "DependencyChain",
    "chain",
    "chain_group",
    "group_key",
    "group_siblings",
    "has_edge",
    "walk",
    "walk_parents",
]
