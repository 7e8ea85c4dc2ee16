# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk entity models.

Immutable records held by the entity store. Changes are made by building a
new record and swapping it into a fresh collection.
"""

from .base import Entity, new_id
from .maintenance import MaintenanceRequest
from .notification import Notification
from .payment import Payment
from .room import Room
from .tenant import Tenant

__all__ = [
    "Entity",
    "MaintenanceRequest",
    "Notification",
    "Payment",
    "Room",
    "Tenant",
    "new_id",
]
