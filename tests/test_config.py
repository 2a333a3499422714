# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Configuration Tests for HeapGC.

Covers the frozen config dataclass, the functional builder, the
environment loader and exception formatting.
"""

import dataclasses

import pytest

from heapgc.builder import (
    build_config,
    create_config,
    create_empty_config,
    keep_history,
    quiet,
    use_mark_flags,
    use_mark_set,
)
from heapgc.config import CollectorConfig, SweepStrategy
from heapgc.core import Collector
from heapgc.env import create_config_from_env
from heapgc.exceptions import ConfigurationError, HeapGCError


# ============================================================================
# CollectorConfig
# ============================================================================

def test_default_config():
    config = CollectorConfig()

    assert config.strategy == SweepStrategy.MARK_SET
    assert config.log_collections is True
    assert config.history_limit == 16


def test_config_is_frozen():
    config = CollectorConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.history_limit = 3


def test_config_collects_all_errors():
    with pytest.raises(ConfigurationError) as exc_info:
        CollectorConfig(strategy="fast", log_collections="yes", history_limit=-1)

    errors = exc_info.value.details["errors"]
    assert len(errors) == 3
    assert "Details" in str(exc_info.value)


def test_with_updates_returns_validated_copy():
    config = CollectorConfig()

    updated = config.with_updates(strategy=SweepStrategy.MARK_FLAG)

    assert updated.strategy == SweepStrategy.MARK_FLAG
    assert config.strategy == SweepStrategy.MARK_SET
    with pytest.raises(ConfigurationError):
        config.with_updates(history_limit=-5)


# ============================================================================
# Builder
# ============================================================================

def test_builder_composes_config():
    config = create_empty_config()
    config = use_mark_flags(config)
    config = keep_history(config, 4)
    config = quiet(config)

    built = build_config(config)

    assert built == CollectorConfig(
        strategy=SweepStrategy.MARK_FLAG, log_collections=False, history_limit=4
    )


def test_builder_does_not_mutate_input():
    base = create_empty_config()
    flagged = use_mark_flags(base)

    assert base["strategy"] == SweepStrategy.MARK_SET
    assert use_mark_set(flagged)["strategy"] == SweepStrategy.MARK_SET


def test_create_config_accepts_strategy_names():
    assert create_config(strategy="mark_flag").strategy == SweepStrategy.MARK_FLAG

    with pytest.raises(ConfigurationError):
        create_config(strategy="generational")


def test_collector_uses_configured_history_limit():
    gc = Collector(create_config(history_limit=1, log_collections=False))

    gc.collect_garbage([])
    gc.collect_garbage([])

    assert len(gc.get_metrics().history) == 1


# ============================================================================
# Environment
# ============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    for name in ("HEAPGC_STRATEGY", "HEAPGC_HISTORY_LIMIT", "HEAPGC_LOG_COLLECTIONS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_env_defaults(clean_env):
    assert create_config_from_env() == CollectorConfig()


def test_env_overrides(clean_env):
    clean_env.setenv("HEAPGC_STRATEGY", "MARK_FLAG")
    clean_env.setenv("HEAPGC_HISTORY_LIMIT", "3")
    clean_env.setenv("HEAPGC_LOG_COLLECTIONS", "off")

    config = create_config_from_env()

    assert config.strategy == SweepStrategy.MARK_FLAG
    assert config.history_limit == 3
    assert config.log_collections is False


@pytest.mark.parametrize(
    "name, value, fragment",
    [
        ("HEAPGC_STRATEGY", "incremental", "HEAPGC_STRATEGY"),
        ("HEAPGC_HISTORY_LIMIT", "many", "HEAPGC_HISTORY_LIMIT"),
        ("HEAPGC_HISTORY_LIMIT", "-2", "HEAPGC_HISTORY_LIMIT"),
        ("HEAPGC_LOG_COLLECTIONS", "maybe", "HEAPGC_LOG_COLLECTIONS"),
    ],
)
def test_env_invalid_values(clean_env, name, value, fragment):
    clean_env.setenv(name, value)

    with pytest.raises(ConfigurationError, match=fragment):
        create_config_from_env()


# ============================================================================
# Exceptions
# ============================================================================

def test_error_without_details_prints_message():
    error = HeapGCError("boom")

    assert str(error) == "boom"
    assert error.details == {}
