# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk entity store.

Holds every collection for a session and exposes read access plus
whole-collection, copy-and-swap replacement.
"""

from .store import COLLECTION_TYPES, EntityStore, StoreSnapshot, to_kind

__all__ = [
    "COLLECTION_TYPES",
    "EntityStore",
    "StoreSnapshot",
    "to_kind",
]
