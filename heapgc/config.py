# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Configuration - Immutable configuration data structures.

All configuration is frozen (immutable) after creation so a collector
cannot have its strategy swapped out between the mark and sweep phases.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class SweepStrategy(str, Enum):
    """How the collector records which nodes were reached."""

    MARK_SET = "mark_set"  # External identity set, rebuilt every cycle
    MARK_FLAG = "mark_flag"  # Transient per-node flag, reset during sweep


@dataclass(frozen=True)
class CollectorConfig:
    """
    Immutable configuration for a mark-and-sweep collector.

    Both strategies yield identical object counts; the choice only
    changes where mark state lives during a cycle.
    """

    # Where marks are recorded during a cycle
    strategy: SweepStrategy = SweepStrategy.MARK_SET

    # Emit gc_cycle_* log events
    log_collections: bool = True

    # Number of recent CollectionResults kept for metrics
    history_limit: int = 16

    def __post_init__(self) -> None:
        """Validate configuration after creation."""
        errors: List[str] = []

        if not isinstance(self.strategy, SweepStrategy):
            errors.append(f"Invalid strategy: {self.strategy!r}")

        if not isinstance(self.log_collections, bool):
            errors.append(
                f"log_collections must be a bool, got {type(self.log_collections).__name__}"
            )

        if not isinstance(self.history_limit, int) or isinstance(self.history_limit, bool):
            errors.append(f"history_limit must be an int, got {self.history_limit!r}")
        elif self.history_limit < 0:
            errors.append(f"history_limit must be >= 0, got {self.history_limit}")

        # Raise all errors at once
        if errors:
            from heapgc.exceptions import ConfigurationError

            raise ConfigurationError(
                "Configuration validation failed",
                details={"errors": errors},
            )

    def with_updates(self, **kwargs) -> "CollectorConfig":
        """
        Create a new config with updated values.

        Since the config is frozen, this creates a new instance.
        """
        from dataclasses import asdict

        current = asdict(self)
        current.update(kwargs)
        return CollectorConfig(**current)
