# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Builder - Functional builder pattern for configuration.

This module provides pure functions for building CollectorConfig objects.
Each function takes a config dict and returns a new dict with the
modification applied (immutable updates).
"""

from typing import Any, Callable, Dict

from heapgc.config import CollectorConfig, SweepStrategy


# Type alias for builder functions
ConfigDict = Dict[str, Any]
BuilderFunc = Callable[[ConfigDict], ConfigDict]


def create_empty_config() -> ConfigDict:
    """
    Create an initial configuration dictionary.

    Returns:
        Dict with default values for all configuration fields
    """
    return {
        "strategy": SweepStrategy.MARK_SET,
        "log_collections": True,
        "history_limit": 16,
    }


def use_mark_set(config: ConfigDict) -> ConfigDict:
    """
    Record marks in an external identity set rebuilt every cycle.

    This is the default strategy. Use this explicitly for clarity.
    """
    return {**config, "strategy": SweepStrategy.MARK_SET}


def use_mark_flags(config: ConfigDict) -> ConfigDict:
    """
    Record marks as a transient flag on each node.

    The sweep phase clears every flag it finds set, so the next cycle
    starts from unmarked nodes.
    """
    return {**config, "strategy": SweepStrategy.MARK_FLAG}


def keep_history(config: ConfigDict, limit: int) -> ConfigDict:
    """
    Set how many recent collection results the metrics retain.

    Args:
        config: Current configuration dictionary
        limit: Number of results to keep (0 disables history)

    Returns:
        New configuration dictionary with history limit set
    """
    return {**config, "history_limit": limit}


def quiet(config: ConfigDict) -> ConfigDict:
    """Disable gc_cycle_* log events."""
    return {**config, "log_collections": False}


def build_config(config: ConfigDict) -> CollectorConfig:
    """
    Convert a configuration dictionary into an immutable CollectorConfig.

    Args:
        config: Configuration dictionary built with the helpers above

    Returns:
        Validated, frozen CollectorConfig

    Raises:
        ConfigurationError: If configuration is invalid
    """
    return CollectorConfig(**config)


def create_config(
    *,
    strategy: SweepStrategy | str = SweepStrategy.MARK_SET,
    log_collections: bool = True,
    history_limit: int = 16,
) -> CollectorConfig:
    """
    Create a CollectorConfig from keyword arguments.

    Strategy names are accepted as plain strings ("mark_set", "mark_flag").
    """
    from heapgc.exceptions import ConfigurationError

    try:
        resolved = SweepStrategy(strategy)
    except ValueError as exc:
        raise ConfigurationError(
            "Configuration validation failed",
            details={"errors": [f"Invalid strategy: {strategy!r}"]},
        ) from exc

    return CollectorConfig(
        strategy=resolved,
        log_collections=log_collections,
        history_limit=history_limit,
    )
