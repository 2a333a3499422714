# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Example: collecting a small object graph.

Builds A -> B, A -> C, B -> D, collects with A as the only root, then
drops the A -> C edge and collects again so that C is reclaimed.

Run with:
    python examples/sample_graph.py

Environment variables:
    HEAPGC_STRATEGY: 'mark_set' or 'mark_flag'
    HEAPGC_LOG_COLLECTIONS: set to 'false' to silence cycle logs
"""

from heapgc import Collector, add_child, create_config_from_env, create_node, disconnect


def main() -> None:
    gc = Collector(create_config_from_env())

    a = create_node("A")
    b = create_node("B")
    c = create_node("C")
    d = create_node("D")

    for node in (a, b, c, d):
        gc.register(node)

    add_child(a, b)
    add_child(a, c)
    add_child(b, d)

    print(f"Before GC: {gc.count_objects()} objects registered")

    gc.collect_garbage([a])
    print(f"After GC: {gc.count_objects()} objects registered")

    # B never pointed at C; dropping A -> C leaves C unreachable
    disconnect(a, c)
    disconnect(b, c)

    gc.collect_garbage([a])
    print(f"After removing C: {gc.count_objects()} objects registered")


if __name__ == "__main__":
    main()
