# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk workflows.

Every operation reads the store, builds new records and commits them in a
single copy-and-swap step.
"""

from .maintenance import (
    add_maintenance_request,
    delete_maintenance_request,
    update_maintenance_status,
)
from .notifications import (
    add_notification,
    mark_all_notifications_read,
    mark_notification_read,
    unread_count,
)
from .payments import (
    add_payment,
    delete_payment,
    due_within,
    mark_overdue,
    mark_past_due,
    payments_for_tenant,
    record_payment,
)
from .rooms import (
    add_room,
    delete_room,
    end_room_maintenance,
    start_room_maintenance,
    update_room,
)
from .tenants import add_tenant, delete_tenant, update_tenant

__all__ = [
    # Payments
    "add_payment",
    "delete_payment",
    "due_within",
    "mark_overdue",
    "mark_past_due",
    "payments_for_tenant",
    "record_payment",
    # Tenants
    "add_tenant",
    "delete_tenant",
    "update_tenant",
    # Rooms
    "add_room",
    "delete_room",
    "end_room_maintenance",
    "start_room_maintenance",
    "update_room",
    # Maintenance
    "add_maintenance_request",
    "delete_maintenance_request",
    "update_maintenance_status",
    # Notifications
    "add_notification",
    "mark_all_notifications_read",
    "mark_notification_read",
    "unread_count",
]
