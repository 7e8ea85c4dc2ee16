# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import field_validator, model_validator

from ..core.primitives import (
    NonBlankStr,
    NonNegativeDecimal,
    RoomStatusEnum,
    RoomTypeEnum,
    normalize_facilities,
    parse_amount,
)
from .base import Entity


class Room(Entity):
    """
    A rentable room.

    Attributes:
        number: Room number as shown on the door
        floor: Floor label
        type: Room category
        price: Monthly rent
        status: Occupancy state; OCCUPIED iff ``tenant_id`` is set
        tenant_id: Tenant currently assigned, if any
        facilities: Distinct facility names
    """

    number: NonBlankStr
    floor: str = ""
    type: RoomTypeEnum = RoomTypeEnum.SINGLE
    price: NonNegativeDecimal
    status: RoomStatusEnum = RoomStatusEnum.VACANT
    tenant_id: Optional[str] = None
    facilities: Tuple[str, ...] = ()

    @field_validator("number", "floor", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, v: Any):
        return parse_amount(v, "price")

    @field_validator("facilities", mode="before")
    @classmethod
    def parse_facilities(cls, v: Any) -> Tuple[str, ...]:
        return normalize_facilities(v)

    @model_validator(mode="after")
    def check_occupancy(self) -> "Room":
        if self.status == RoomStatusEnum.OCCUPIED and self.tenant_id is None:
            raise ValueError("An occupied room must reference a tenant")
        if self.status != RoomStatusEnum.OCCUPIED and self.tenant_id is not None:
            raise ValueError(
                f"A {self.status.value} room cannot reference a tenant"
            )
        return self
