# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Environment-based configuration helpers.

Reads a small set of well-known environment variables and passes them
through to create_config().
"""

from __future__ import annotations

import os

from heapgc.builder import create_config
from heapgc.config import CollectorConfig, SweepStrategy
from heapgc.errors import (
    explain_invalid_history_limit_env,
    explain_invalid_log_collections_env,
    explain_invalid_strategy_env,
)
from heapgc.exceptions import ConfigurationError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_strategy(value: str | None) -> SweepStrategy:
    if not value:
        return SweepStrategy.MARK_SET
    try:
        return SweepStrategy(value.strip().lower())
    except ValueError as exc:
        raise ConfigurationError(explain_invalid_strategy_env(value)) from exc


def _parse_history_limit(value: str | None) -> int:
    if not value:
        return 16
    try:
        limit = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(explain_invalid_history_limit_env(value)) from exc
    if limit < 0:
        raise ConfigurationError(explain_invalid_history_limit_env(value))
    return limit


def _parse_log_collections(value: str | None) -> bool:
    if not value:
        return True
    lower = value.strip().lower()
    if lower in _TRUE_VALUES:
        return True
    if lower in _FALSE_VALUES:
        return False
    raise ConfigurationError(explain_invalid_log_collections_env(value))


def create_config_from_env() -> CollectorConfig:
    """
    Create a CollectorConfig from environment variables.

    Optional environment variables:
        - HEAPGC_STRATEGY: 'mark_set' | 'mark_flag' (default: mark_set)
        - HEAPGC_HISTORY_LIMIT: Non-negative integer (default: 16)
        - HEAPGC_LOG_COLLECTIONS: Boolean flag (default: true)
    """

    return create_config(
        strategy=_parse_strategy(os.getenv("HEAPGC_STRATEGY")),
        log_collections=_parse_log_collections(os.getenv("HEAPGC_LOG_COLLECTIONS")),
        history_limit=_parse_history_limit(os.getenv("HEAPGC_HISTORY_LIMIT")),
    )
