"""Shared test doubles: a minimal tree matching the chaining Protocols."""

from __future__ import annotations

from tests.fakes.tree import FakeNode, FakeTree, build_tree

__all__ = ["FakeNode", "FakeTree", "build_tree"]
