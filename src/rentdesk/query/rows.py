# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Display rows: records joined with the labels of the records they reference.

A reference to a missing record resolves to the configured placeholder
(``"Unknown"`` by default) instead of raising. Rows delegate attribute
access to the wrapped record, so the same filters work on rows and records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..core.primitives import EntityKindEnum, GlobalSettings
from ..entities import MaintenanceRequest, Payment, Tenant
from ..store import EntityStore


class _Row:
    def __getattr__(self, name: str) -> Any:
        # Only reached for names the row itself does not define
        if name == "record":
            raise AttributeError(name)
        return getattr(self.record, name)


@dataclass(frozen=True)
class PaymentRow(_Row):
    record: Payment
    tenant_name: str
    room_number: str


@dataclass(frozen=True)
class TenantRow(_Row):
    record: Tenant
    room_number: str


@dataclass(frozen=True)
class MaintenanceRow(_Row):
    record: MaintenanceRequest
    room_number: str


def tenant_name(
    store: EntityStore, tenant_id: Optional[str], settings: Optional[GlobalSettings] = None
) -> str:
    settings = settings or GlobalSettings()
    tenant = store.find(EntityKindEnum.TENANTS, tenant_id)
    return tenant.name if tenant is not None else settings.display.unknown_label


def room_number(
    store: EntityStore, room_id: Optional[str], settings: Optional[GlobalSettings] = None
) -> str:
    settings = settings or GlobalSettings()
    room = store.find(EntityKindEnum.ROOMS, room_id)
    return room.number if room is not None else settings.display.unknown_label


def payment_rows(
    store: EntityStore, settings: Optional[GlobalSettings] = None
) -> Tuple[PaymentRow, ...]:
    """Payments with tenant name and room number attached."""
    settings = settings or GlobalSettings()
    return tuple(
        PaymentRow(
            record=payment,
            tenant_name=tenant_name(store, payment.tenant_id, settings),
            room_number=room_number(store, payment.room_id, settings),
        )
        for payment in store.get(EntityKindEnum.PAYMENTS)
    )


def tenant_rows(
    store: EntityStore, settings: Optional[GlobalSettings] = None
) -> Tuple[TenantRow, ...]:
    """
    Tenants with their room number attached.

    A tenant without a room gets an empty room number, not the placeholder.
    """
    settings = settings or GlobalSettings()
    return tuple(
        TenantRow(
            record=tenant,
            room_number=(
                room_number(store, tenant.room_id, settings)
                if tenant.room_id is not None
                else ""
            ),
        )
        for tenant in store.get(EntityKindEnum.TENANTS)
    )


def maintenance_rows(
    store: EntityStore, settings: Optional[GlobalSettings] = None
) -> Tuple[MaintenanceRow, ...]:
    """Maintenance requests with their room number attached."""
    settings = settings or GlobalSettings()
    return tuple(
        MaintenanceRow(
            record=request,
            room_number=room_number(store, request.room_id, settings),
        )
        for request in store.get(EntityKindEnum.MAINTENANCE)
    )
