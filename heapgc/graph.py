# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Object Graph - Named heap nodes linked by non-owning edges.

A parent holds only weak references to its children. An edge lets the
mark phase reach a child but never keeps it alive: a node exists only
while the host program holds a strong reference to it. A child whose
last owner has gone resolves to None and is treated as unreachable.

Nodes compare by identity. Two nodes sharing a name are distinct.
"""

import weakref
from dataclasses import dataclass, field
from typing import Iterator, List

from heapgc.errors import explain_not_a_node
from heapgc.exceptions import RegistrationError


@dataclass(eq=False)
class Node:
    """A heap object with a diagnostic name and weak child links."""

    name: str
    children: List["weakref.ref[Node]"] = field(default_factory=list, init=False, repr=False)

    # Set by the flag-based mark phase, cleared again by its sweep
    marked: bool = field(default=False, init=False, repr=False)

    def live_children(self) -> Iterator["Node"]:
        """Yield the children that still resolve, in insertion order."""
        for ref in self.children:
            child = ref()
            if child is not None:
                yield child


def require_node(value: object, role: str) -> Node:
    """Return value unchanged if it is a Node, else raise RegistrationError."""
    if not isinstance(value, Node):
        raise RegistrationError(
            explain_not_a_node(value, role),
            details={"role": role, "type": type(value).__name__},
        )
    return value


def create_node(name: str) -> Node:
    """
    Allocate a node with an empty child list.

    Args:
        name: Diagnostic label, not used for identity

    Returns:
        The new node. The caller holds its only owning reference.
    """
    return Node(name=name)


def add_child(parent: Node, child: Node) -> None:
    """
    Append a non-owning edge parent -> child.

    Duplicate edges and cycles are allowed; the mark phase visits each
    node at most once regardless.
    """
    require_node(parent, "parent")
    require_node(child, "child")

    parent.children.append(weakref.ref(child))


def remove_child(parent: Node, target: Node) -> int:
    """
    Remove every edge from parent that currently resolves to target.

    Dead edges are left in place. Ownership is unaffected; only future
    reachability changes.

    Returns:
        Number of edges removed
    """
    require_node(parent, "parent")
    require_node(target, "target")

    before = len(parent.children)
    parent.children = [ref for ref in parent.children if ref() is not target]
    return before - len(parent.children)


def disconnect(parent: Node, target: Node) -> int:
    """
    Drop the host's edges from parent to target before the next collection.

    Equivalent to remove_child(); named for the host-side use of
    simulating an application letting go of a reference.
    """
    return remove_child(parent, target)
