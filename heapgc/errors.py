# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Human-friendly error message helpers for HeapGC.

These helpers centralize wording for common configuration errors so that
all modules present consistent, actionable messages.
"""


def explain_invalid_strategy_env(value: str | None) -> str:
    """
    Explain that HEAPGC_STRATEGY is invalid.
    """

    return (
        f"Invalid HEAPGC_STRATEGY value: {value!r}. "
        "Expected one of: 'mark_set' or 'mark_flag'."
    )


def explain_invalid_history_limit_env(value: str | None) -> str:
    """
    Explain that HEAPGC_HISTORY_LIMIT is invalid.
    """

    return (
        f"Invalid HEAPGC_HISTORY_LIMIT value: {value!r}. "
        "It must be a non-negative integer number of collection results."
    )


def explain_invalid_log_collections_env(value: str | None) -> str:
    """
    Explain that HEAPGC_LOG_COLLECTIONS is invalid.
    """

    return (
        f"Invalid HEAPGC_LOG_COLLECTIONS value: {value!r}. "
        "Expected a boolean such as 'true', 'false', '1' or '0'."
    )


def explain_not_a_node(value: object, role: str) -> str:
    """
    Explain that a value passed as a node is not a Node.
    """

    return (
        f"Expected a Node as {role}, got {type(value).__name__}. "
        "Create heap objects with create_node() before linking or registering them."
    )
