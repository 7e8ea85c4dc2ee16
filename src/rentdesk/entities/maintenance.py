# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import datetime
from typing import Any

from pydantic import field_validator

from ..core.primitives import (
    EntityId,
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    NonBlankStr,
    parse_iso_date,
)
from .base import Entity


class MaintenanceRequest(Entity):
    """A reported problem with a room and its repair progress."""

    room_id: EntityId
    title: NonBlankStr
    description: str = ""
    priority: MaintenancePriorityEnum = MaintenancePriorityEnum.NORMAL
    status: MaintenanceStatusEnum = MaintenanceStatusEnum.OPEN
    date: datetime.date

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> datetime.date:
        return parse_iso_date(v, "date")

    @property
    def is_open(self) -> bool:
        return self.status != MaintenanceStatusEnum.COMPLETED
