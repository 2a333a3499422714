# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC - A minimal tracing garbage collector simulator.

Models a heap of named nodes joined by non-owning edges and reclaims,
by mark-and-sweep, every registered node that is unreachable from a
declared root set. Package name: heapgc.
"""

__version__ = "0.1.0"

# Configuration creation (user-facing API)
from heapgc.builder import create_config
from heapgc.config import CollectorConfig, SweepStrategy

# Object graph
from heapgc.graph import Node, add_child, create_node, disconnect, remove_child

# Collector
from heapgc.core import CollectionResult, Collector, CollectorMetrics

# Environment-based configuration
from heapgc.env import create_config_from_env

from heapgc.exceptions import ConfigurationError, HeapGCError, RegistrationError

__all__ = [
    # Version
    "__version__",
    # Configuration
    "create_config",
    "create_config_from_env",
    "CollectorConfig",
    "SweepStrategy",
    # Object graph
    "Node",
    "create_node",
    "add_child",
    "remove_child",
    "disconnect",
    # Collector
    "Collector",
    "CollectionResult",
    "CollectorMetrics",
    # Errors
    "HeapGCError",
    "ConfigurationError",
    "RegistrationError",
]
