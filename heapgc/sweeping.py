# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Sweep Phase - Registry compaction.

An entry survives iff its node is still alive and was marked by the
preceding mark phase. Everything else is dropped from the registry.
"""

from dataclasses import dataclass
from typing import List

from heapgc.graph import Node
from heapgc.marking import MarkSet
from heapgc.registry import ObjectRegistry


@dataclass
class SweepOutcome:
    """Counts produced by a single sweep."""

    kept: int
    reclaimed: int  # alive but unmarked
    dead_entries: int  # node already dropped by the host


def sweep_with_mark_set(registry: ObjectRegistry, marked: MarkSet) -> SweepOutcome:
    """Drop registry entries that are dead or absent from the mark set."""
    dead = 0
    reclaimed = 0

    def keep(node: Node | None) -> bool:
        nonlocal dead, reclaimed
        if node is None:
            dead += 1
            return False
        if id(node) not in marked:
            reclaimed += 1
            return False
        return True

    registry.retain(keep)
    return SweepOutcome(kept=len(registry), reclaimed=reclaimed, dead_entries=dead)


def sweep_with_flags(registry: ObjectRegistry, flagged: List[Node]) -> SweepOutcome:
    """
    Drop registry entries that are dead or unflagged, then clear flags.

    Retention is decided for every entry before any flag is cleared, so a
    node registered twice keeps both entries. Every node in flagged is
    reset, including marked nodes that were never registered; a stale
    flag would make an unreachable node look reachable next cycle.
    """
    dead = 0
    reclaimed = 0

    def keep(node: Node | None) -> bool:
        nonlocal dead, reclaimed
        if node is None:
            dead += 1
            return False
        if not node.marked:
            reclaimed += 1
            return False
        return True

    try:
        registry.retain(keep)
    finally:
        for node in flagged:
            node.marked = False

    return SweepOutcome(kept=len(registry), reclaimed=reclaimed, dead_entries=dead)
