# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import field_validator, model_validator

from ..core.primitives import (
    NonBlankStr,
    PaymentStatusEnum,
    TenantStatusEnum,
    ValidationMixin,
    parse_iso_date,
)
from .base import Entity


class Tenant(Entity, ValidationMixin):
    """
    A person renting, or who has rented, a room.

    ``room_id`` mirrors the store's assignment table and ``payment_status``
    is derived from the tenant's payments; neither is written by form edits.

    Attributes:
        name: Full name
        email: Contact email
        phone: Contact phone number
        room_id: Room currently assigned, if any
        start_date: Lease start
        end_date: Lease end, if known
        status: Whether the tenant currently holds a lease
        payment_status: Worst outstanding status among the tenant's payments
    """

    name: NonBlankStr
    email: str = ""
    phone: str = ""
    room_id: Optional[str] = None
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    status: TenantStatusEnum = TenantStatusEnum.ACTIVE
    payment_status: PaymentStatusEnum = PaymentStatusEnum.PAID

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Any, info) -> Optional[datetime.date]:
        return parse_iso_date(v, info.field_name, required=False)

    @model_validator(mode="before")
    @classmethod
    def check_lease_window(cls, data: Any) -> Any:
        if isinstance(data, dict):
            cls.validate_date_ordering(data, "start_date", "end_date")
        return data
