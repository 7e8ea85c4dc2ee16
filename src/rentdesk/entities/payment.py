# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import field_validator, model_validator

from ..core.primitives import (
    EntityId,
    NonNegativeDecimal,
    PaymentMethodEnum,
    PaymentStatusEnum,
    parse_amount,
    parse_iso_date,
)
from .base import Entity


class Payment(Entity):
    """
    A rent charge and, once settled, its receipt.

    ``tenant_id`` and ``room_id`` are plain references; a missing target is
    shown as a placeholder, never treated as an error.

    Attributes:
        tenant_id: Tenant billed
        room_id: Room the charge is for
        amount: Amount due
        date: Date the payment was recorded; None while unpaid
        due_date: Date the payment falls due
        status: Lifecycle state
        payment_method: How the payment was settled
        notes: Free-form notes
    """

    tenant_id: EntityId
    room_id: EntityId
    amount: NonNegativeDecimal
    date: Optional[datetime.date] = None
    due_date: datetime.date
    status: PaymentStatusEnum = PaymentStatusEnum.PENDING
    payment_method: Optional[PaymentMethodEnum] = None
    notes: str = ""

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount_value(cls, v: Any):
        return parse_amount(v, "amount")

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Optional[datetime.date]:
        return parse_iso_date(v, "date", required=False)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v: Any) -> datetime.date:
        return parse_iso_date(v, "due_date")

    @field_validator("payment_method", mode="before")
    @classmethod
    def blank_method(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip().lower() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_paid_has_date(self) -> "Payment":
        if self.status == PaymentStatusEnum.PAID and self.date is None:
            raise ValueError("A paid payment must have a payment date")
        return self

    @property
    def is_outstanding(self) -> bool:
        return self.status != PaymentStatusEnum.PAID
