# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Union


class EntityKindEnum(str, Enum):
    """
    Collections held by the entity store.

    Each kind names one ordered collection that is replaced wholesale on
    every mutation.
    """

    TENANTS = "tenants"
    ROOMS = "rooms"
    PAYMENTS = "payments"
    MAINTENANCE = "maintenance"
    NOTIFICATIONS = "notifications"


class TenantStatusEnum(str, Enum):
    """Whether a tenant currently holds a lease."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class PaymentStatusEnum(str, Enum):
    """
    Recorded state of a payment, also used as a tenant's derived status.

    Ordered by severity for derivation: OVERDUE outranks PENDING, which
    outranks PAID.

    Attributes:
        PAID: Money received; terminal for a payment record.
        PENDING: Billed and not yet due or not yet flagged late.
        OVERDUE: Past its due date without being recorded as paid.
    """

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"

    @property
    def severity(self) -> int:
        return _PAYMENT_SEVERITY[self]


_PAYMENT_SEVERITY = {
    PaymentStatusEnum.PAID: 0,
    PaymentStatusEnum.PENDING: 1,
    PaymentStatusEnum.OVERDUE: 2,
}


class PaymentMethodEnum(str, Enum):
    """How a payment was settled."""

    CASH = "cash"
    TRANSFER = "transfer"
    CARD = "card"
    UPI = "upi"
    CHEQUE = "cheque"


class RoomTypeEnum(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    DELUXE = "deluxe"


class RoomStatusEnum(str, Enum):
    """
    Occupancy state of a room.

    OCCUPIED is never written directly; it is projected from the store's
    assignment table. MAINTENANCE is an explicit, separate transition.
    """

    VACANT = "vacant"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class MaintenancePriorityEnum(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class MaintenanceStatusEnum(str, Enum):
    """
    Progress of a maintenance request.

    Requests only move forward: OPEN -> IN_PROGRESS -> COMPLETED.
    """

    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @property
    def stage(self) -> int:
        return _MAINTENANCE_STAGE[self]


_MAINTENANCE_STAGE = {
    MaintenanceStatusEnum.OPEN: 0,
    MaintenanceStatusEnum.IN_PROGRESS: 1,
    MaintenanceStatusEnum.COMPLETED: 2,
}


class NotificationTypeEnum(str, Enum):
    PAYMENT = "payment"
    MAINTENANCE = "maintenance"
    SYSTEM = "system"
    TENANT = "tenant"


class NotificationPriorityEnum(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


def enum_to_string(value: Union[Enum, str, None]) -> str:
    """
    Return the plain string value of an enum member.

    Plain strings pass through unchanged and None becomes an empty string, so
    callers can compare enum fields and raw form values uniformly.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
