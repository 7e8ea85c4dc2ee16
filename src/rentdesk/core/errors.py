# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Typed error outcomes for RentDesk operations.

Every operation reports failure synchronously by raising one of these.
Nothing is retried: an in-memory, single-threaded store has no transient
failures.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class RentDeskError(Exception):
    """Base class for all errors raised by RentDesk operations."""


class NotFoundError(RentDeskError, LookupError):
    """A referenced id is absent from its collection."""

    def __init__(self, kind: Union[Enum, str], entity_id: str):
        self.kind = kind.value if isinstance(kind, Enum) else kind
        self.entity_id = entity_id
        super().__init__(f"No {self.kind} record with id '{entity_id}'")


class ConflictError(RentDeskError):
    """The operation would violate an invariant of the store."""


class ValidationError(RentDeskError, ValueError):
    """
    A malformed or missing field reached the core.

    Attributes:
        field: Name of the offending field, when a single field is at fault.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
