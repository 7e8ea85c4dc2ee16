# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for RentDesk testing.

This module provides convenient utilities for creating test records and a
seeded store without repeating every required field.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from rentdesk.entities import MaintenanceRequest, Notification, Payment, Room, Tenant
from rentdesk.store import EntityStore


# Record Utilities
def make_room(room_id: str = "r1", number: str = "101", **kwargs: Any) -> Room:
    """Create a vacant room with sensible defaults."""
    data = {"id": room_id, "number": number, "floor": "1", "price": Decimal("500")}
    data.update(kwargs)
    return Room(**data)


def make_tenant(tenant_id: str = "t1", name: str = "Asha Rao", **kwargs: Any) -> Tenant:
    """Create an active tenant with no room."""
    data = {
        "id": tenant_id,
        "name": name,
        "email": f"{tenant_id}@example.com",
        "phone": "555-0100",
        "start_date": "2024-01-01",
    }
    data.update(kwargs)
    return Tenant(**data)


def make_payment(
    payment_id: str = "p1",
    tenant_id: str = "t1",
    room_id: str = "r1",
    amount: Any = "500",
    **kwargs: Any,
) -> Payment:
    """
    Create a pending payment due 2024-03-05.

    Example:
        >>> make_payment(status="paid", date="2024-03-10").status.value
        'paid'
    """
    data = {
        "id": payment_id,
        "tenant_id": tenant_id,
        "room_id": room_id,
        "amount": amount,
        "due_date": "2024-03-05",
    }
    data.update(kwargs)
    return Payment(**data)


def make_request(
    request_id: str = "m1", room_id: str = "r1", **kwargs: Any
) -> MaintenanceRequest:
    data = {
        "id": request_id,
        "room_id": room_id,
        "title": "Leaking tap",
        "date": "2024-03-01",
    }
    data.update(kwargs)
    return MaintenanceRequest(**data)


def make_notification(notification_id: str = "n1", **kwargs: Any) -> Notification:
    data = {
        "id": notification_id,
        "title": "Overdue Payment",
        "date": "2024-03-15T10:00:00",
    }
    data.update(kwargs)
    return Notification(**data)


@pytest.fixture
def empty_store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def store() -> EntityStore:
    """
    A small property: three rooms, two tenants, one of them housed.

    - r1 (101): occupied by t1
    - r2 (102): vacant
    - r3 (201): under maintenance
    - t2: no room
    """
    return EntityStore(
        tenants=[
            make_tenant("t1", "Asha Rao", room_id="r1"),
            make_tenant("t2", "Ben Okafor", email="ben@example.com", phone="555-0199"),
        ],
        rooms=[
            make_room("r1", "101", status="occupied", tenant_id="t1"),
            make_room("r2", "102", type="double", price=Decimal("650")),
            make_room("r3", "201", floor="2", status="maintenance"),
        ],
    )
