# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Test fixtures for HeapGC tests.

Provides collectors for each sweep strategy and factory fixtures for
building and checking small object graphs.
"""

from typing import Callable, Tuple

import pytest

from heapgc.config import CollectorConfig, SweepStrategy
from heapgc.core import Collector
from heapgc.graph import Node, add_child, create_node


@pytest.fixture(params=list(SweepStrategy), ids=lambda s: s.value)
def strategy(request) -> SweepStrategy:
    """Every test using this runs once per sweep strategy."""
    return request.param


@pytest.fixture
def collector(strategy: SweepStrategy) -> Collector:
    """Create a collector for the current strategy."""
    return Collector(CollectorConfig(strategy=strategy))


@pytest.fixture
def new_node() -> Callable[[Collector, str], Node]:
    """Factory that creates a node and registers it with a collector."""

    def factory(gc: Collector, name: str) -> Node:
        node = create_node(name)
        gc.register(node)
        return node

    return factory


@pytest.fixture
def assert_gc_count() -> Callable[[Collector, int, str], None]:
    """Assert the registry size, naming the scenario on failure."""

    def check(gc: Collector, expected: int, context: str) -> None:
        actual = gc.count_objects()
        assert actual == expected, (
            f"[{context}]: object count mismatch (expected: {expected}, actual: {actual})"
        )

    return check


@pytest.fixture
def build_sample_graph(new_node) -> Callable[[Collector], Tuple[Node, Node, Node]]:
    """Factory that builds and registers the chain A -> B -> C."""

    def build(gc: Collector) -> Tuple[Node, Node, Node]:
        a = new_node(gc, "A")
        b = new_node(gc, "B")
        c = new_node(gc, "C")

        add_child(a, b)
        add_child(b, c)

        return a, b, c

    return build
