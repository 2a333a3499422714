# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Object Registry - Weak liveness ledger of registered nodes.

Every node handed to register() gets one weak entry. The registry never
owns a node: an entry whose node has been dropped by the host resolves
to None and is discarded by the next sweep.

Registering the same node twice yields two entries. This is not
prevented; callers are expected to register each node once.
"""

import weakref
from typing import Callable, Dict, Iterator, List

from heapgc.graph import Node


class ObjectRegistry:
    """Unordered collection of weak entries, one per registration."""

    def __init__(self) -> None:
        self._entries: List[weakref.ref] = []

    def register(self, node: Node) -> None:
        """Append a weak entry for node."""
        self._entries.append(weakref.ref(node))

    def retain(self, keep: Callable[[Node | None], bool]) -> int:
        """
        Keep only the entries for which keep(resolved_node) is true.

        keep receives None for an entry whose node is gone.

        Returns:
            Number of entries removed
        """
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if keep(entry())]
        return before - len(self._entries)

    def live_objects(self) -> Iterator[Node]:
        """Yield registered nodes that are still alive, in registration order."""
        for entry in self._entries:
            node = entry()
            if node is not None:
                yield node

    def __len__(self) -> int:
        return len(self._entries)


def get_registry_stats(registry: ObjectRegistry) -> Dict[str, int]:
    """
    Get statistics about the registry.

    Dead entries are those whose node has been dropped since the last
    sweep; they still count towards total_entries until swept.

    Returns:
        Dict with registry statistics
    """
    total = len(registry)
    live = sum(1 for _ in registry.live_objects())
    return {
        "total_entries": total,
        "live_entries": live,
        "dead_entries": total - live,
    }
