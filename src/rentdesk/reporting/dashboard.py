# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Dashboard overview figures.

Counts and short lists shown on the landing screen, all computed from a
single store snapshot.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Tuple

import pandas as pd

from ..core.primitives import (
    EntityKindEnum,
    GlobalSettings,
    PaymentStatusEnum,
    RoomStatusEnum,
    TenantStatusEnum,
    parse_iso_date,
)
from ..query import MaintenanceRow, PaymentRow, maintenance_rows, payment_rows
from ..store import EntityStore
from .financial import occupancy_rate, outstanding_total


@dataclass(frozen=True)
class DashboardSummary:
    """
    Attributes:
        total_rooms: Number of rooms
        occupied_rooms: Rooms with a tenant
        vacant_rooms: Rooms available to assign
        maintenance_rooms: Rooms out of service
        occupancy_rate: Occupied rooms as a whole percent
        active_tenants: Tenants with an active lease
        outstanding_amount: Pending plus overdue across all payments
        upcoming_payments: Outstanding payments due in the current month,
            earliest due first
        open_maintenance: Requests not yet completed, newest first
        unread_notifications: Notifications not yet read
    """

    total_rooms: int
    occupied_rooms: int
    vacant_rooms: int
    maintenance_rooms: int
    occupancy_rate: int
    active_tenants: int
    outstanding_amount: Decimal
    upcoming_payments: Tuple[PaymentRow, ...]
    open_maintenance: Tuple[MaintenanceRow, ...]
    unread_notifications: int


def dashboard_summary(
    store: EntityStore,
    as_of: Any = None,
    settings: Optional[GlobalSettings] = None,
) -> DashboardSummary:
    """
    Summarize the store for the dashboard.

    Args:
        store: Entity store
        as_of: Date whose month defines "upcoming"; defaults to today in the
            reporting timezone
        settings: Global settings
    """
    settings = settings or GlobalSettings()
    as_of_date = parse_iso_date(as_of, "as_of", required=False)
    if as_of_date is None:
        as_of_date = settings.reporting.today()

    month = pd.Period(as_of_date, freq="M")
    month_start: datetime.date = month.start_time.date()
    month_end: datetime.date = month.end_time.date()

    rooms = store.get(EntityKindEnum.ROOMS)
    payments = store.get(EntityKindEnum.PAYMENTS)

    def count_rooms(status: RoomStatusEnum) -> int:
        return sum(1 for room in rooms if room.status == status)

    upcoming = sorted(
        (
            row
            for row in payment_rows(store, settings)
            if row.record.is_outstanding
            and month_start <= row.record.due_date <= month_end
        ),
        key=lambda row: row.record.due_date,
    )
    open_requests = sorted(
        (row for row in maintenance_rows(store, settings) if row.record.is_open),
        key=lambda row: row.record.date,
        reverse=True,
    )

    return DashboardSummary(
        total_rooms=len(rooms),
        occupied_rooms=count_rooms(RoomStatusEnum.OCCUPIED),
        vacant_rooms=count_rooms(RoomStatusEnum.VACANT),
        maintenance_rooms=count_rooms(RoomStatusEnum.MAINTENANCE),
        occupancy_rate=occupancy_rate(rooms),
        active_tenants=sum(
            1
            for tenant in store.get(EntityKindEnum.TENANTS)
            if tenant.status == TenantStatusEnum.ACTIVE
        ),
        outstanding_amount=outstanding_total(payments, PaymentStatusEnum.PENDING)
        + outstanding_total(payments, PaymentStatusEnum.OVERDUE),
        upcoming_payments=tuple(upcoming),
        open_maintenance=tuple(open_requests),
        unread_notifications=sum(
            1 for n in store.get(EntityKindEnum.NOTIFICATIONS) if not n.read
        ),
    )
