# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Mark Phase - Reachability from a root set.

Traversal is iterative with an explicit stack, so deep chains do not
hit the interpreter recursion limit. Each node is visited at most once,
which terminates cycles and keeps shared sub-graphs linear.
"""

from typing import Dict, Iterable, List

from heapgc.graph import Node

# id(node) -> node. Holding the node keeps its id stable for the cycle.
MarkSet = Dict[int, Node]


def mark_from_roots(roots: Iterable[Node]) -> MarkSet:
    """
    Compute the set of nodes transitively reachable from roots.

    Dead child references are skipped. An empty root set marks nothing.

    Args:
        roots: Nodes presumed reachable unconditionally

    Returns:
        Identity mark set of every reached node
    """
    marked: MarkSet = {}
    stack: List[Node] = list(roots)

    while stack:
        node = stack.pop()
        key = id(node)
        if key in marked:
            continue
        marked[key] = node
        stack.extend(node.live_children())

    return marked


def mark_with_flags(roots: Iterable[Node]) -> List[Node]:
    """
    Set node.marked on every node reachable from roots.

    Expects every flag to be clear on entry; sweep_with_flags() restores
    that before returning.

    Returns:
        The nodes flagged by this call, in visit order
    """
    flagged: List[Node] = []
    stack: List[Node] = list(roots)

    while stack:
        node = stack.pop()
        if node.marked:
            continue
        node.marked = True
        flagged.append(node)
        stack.extend(node.live_children())

    return flagged
