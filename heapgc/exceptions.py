# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
HeapGC Exceptions - Custom exceptions for the heapgc package.
"""


class HeapGCError(Exception):
    """Base exception for all HeapGC errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(HeapGCError):
    """Raised when configuration is invalid."""

    pass


class RegistrationError(HeapGCError):
    """Raised when a non-node value is handed to the collector or graph."""

    pass
