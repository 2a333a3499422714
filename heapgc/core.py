# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Core - The mark-and-sweep collector.

The Collector keeps a weak registry of every node it has been told
about and, on collect_garbage(roots), marks everything reachable from
the roots and sweeps the rest out of the registry. It never owns a
node, so count_objects() after a collection is exactly the number of
registered nodes that are both still held by the host and reachable
from the last root set.

All operations are synchronous and assume exclusive access to the
graph for their duration.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Deque, Iterator, List, Sequence

import structlog

from heapgc.config import CollectorConfig, SweepStrategy
from heapgc.graph import Node, require_node
from heapgc.marking import mark_from_roots, mark_with_flags
from heapgc.registry import ObjectRegistry
from heapgc.sweeping import SweepOutcome, sweep_with_flags, sweep_with_mark_set


@dataclass
class CollectionResult:
    """Result of a single collect_garbage() call."""

    cycle_id: str  # ULID
    strategy: str
    roots: List[str]  # root names, for diagnostics only
    scanned: int
    marked: int
    kept: int
    reclaimed: int
    dead_entries: int
    duration_seconds: float


@dataclass
class CollectorMetrics:
    """Running totals across all collections."""

    total_runs: int
    last_run_at: datetime | None
    total_reclaimed: int
    total_dead_entries: int
    registered: int
    history: List[CollectionResult] = field(default_factory=list)


class Collector:
    """Mark-and-sweep collector over a weak object registry."""

    def __init__(self, config: CollectorConfig | None = None) -> None:
        self.config = config or CollectorConfig()
        self._registry = ObjectRegistry()
        self._history: Deque[CollectionResult] = deque(maxlen=self.config.history_limit)
        self._total_runs = 0
        self._total_reclaimed = 0
        self._total_dead_entries = 0
        self._last_run_at: datetime | None = None

    @property
    def registry(self) -> ObjectRegistry:
        return self._registry

    def register(self, node: Node) -> None:
        """
        Add a weak entry for node to the registry.

        Call once per node, right after creating it. A second call adds a
        second entry; nothing rejects it.
        """
        require_node(node, "registered object")
        self._registry.register(node)

        if self.config.log_collections:
            structlog.get_logger().debug(
                "object_registered", name=node.name, registered=len(self._registry)
            )

    def collect_garbage(self, roots: Sequence[Node]) -> CollectionResult:
        """
        Run one mark-and-sweep cycle.

        Marks every node reachable from roots, then drops each registry
        entry whose node is gone or unmarked. Repeating the call with the
        same roots and no graph changes leaves the registry unchanged.

        Args:
            roots: Nodes treated as reachable; may be empty

        Returns:
            CollectionResult describing the cycle
        """
        from ulid import ULID

        root_nodes = [require_node(root, "root") for root in roots]

        logger = structlog.get_logger()
        cycle_id = str(ULID())
        strategy = self.config.strategy
        start_time = datetime.now(UTC)
        scanned = len(self._registry)

        if self.config.log_collections:
            logger.info(
                "gc_cycle_started",
                cycle_id=cycle_id,
                strategy=strategy.value,
                roots=len(root_nodes),
                registered=scanned,
            )

        marked_count, outcome = self._mark_and_sweep(root_nodes)

        duration = (datetime.now(UTC) - start_time).total_seconds()

        self._last_run_at = datetime.now(UTC)
        self._total_runs += 1
        self._total_reclaimed += outcome.reclaimed
        self._total_dead_entries += outcome.dead_entries

        result = CollectionResult(
            cycle_id=cycle_id,
            strategy=strategy.value,
            roots=[root.name for root in root_nodes],
            scanned=scanned,
            marked=marked_count,
            kept=outcome.kept,
            reclaimed=outcome.reclaimed,
            dead_entries=outcome.dead_entries,
            duration_seconds=duration,
        )
        self._history.append(result)

        if self.config.log_collections:
            logger.info(
                "gc_cycle_completed",
                cycle_id=cycle_id,
                marked=marked_count,
                kept=outcome.kept,
                reclaimed=outcome.reclaimed,
                dead_entries=outcome.dead_entries,
                duration=duration,
            )
        return result

    def _mark_and_sweep(self, roots: List[Node]) -> tuple[int, SweepOutcome]:
        if self.config.strategy == SweepStrategy.MARK_FLAG:
            flagged = mark_with_flags(roots)
            return len(flagged), sweep_with_flags(self._registry, flagged)

        marked = mark_from_roots(roots)
        return len(marked), sweep_with_mark_set(self._registry, marked)

    def count_objects(self) -> int:
        """Number of entries currently in the registry."""
        return len(self._registry)

    def live_objects(self) -> Iterator[Node]:
        """Yield registered nodes whose owners still hold them."""
        return self._registry.live_objects()

    def get_metrics(self) -> CollectorMetrics:
        """Get current collector metrics."""
        return CollectorMetrics(
            total_runs=self._total_runs,
            last_run_at=self._last_run_at,
            total_reclaimed=self._total_reclaimed,
            total_dead_entries=self._total_dead_entries,
            registered=len(self._registry),
            history=list(self._history),
        )
