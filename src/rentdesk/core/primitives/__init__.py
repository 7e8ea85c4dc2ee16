# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk Core Primitives

Essential building blocks shared by every RentDesk component.
Handles the immutable model base, enums, settings, monthly timelines and
boundary validation.
"""

from .enums import (
    EntityKindEnum,
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    NotificationPriorityEnum,
    NotificationTypeEnum,
    PaymentMethodEnum,
    PaymentStatusEnum,
    RoomStatusEnum,
    RoomTypeEnum,
    TenantStatusEnum,
    enum_to_string,
)
from .model import Model
from .settings import DisplaySettings, GlobalSettings, ReportingSettings
from .timeline import MonthBucket, Timeline
from .types import EntityId, NonBlankStr, NonNegativeDecimal, PositiveInt
from .validation import (
    ValidationMixin,
    build_entity,
    normalize_facilities,
    parse_amount,
    parse_iso_date,
    revise_entity,
)

__all__ = [
    # Core models
    "Model",
    "Timeline",
    "MonthBucket",
    # Settings
    "GlobalSettings",
    "ReportingSettings",
    "DisplaySettings",
    # Enums
    "EntityKindEnum",
    "MaintenancePriorityEnum",
    "MaintenanceStatusEnum",
    "NotificationPriorityEnum",
    "NotificationTypeEnum",
    "PaymentMethodEnum",
    "PaymentStatusEnum",
    "RoomStatusEnum",
    "RoomTypeEnum",
    "TenantStatusEnum",
    "enum_to_string",
    # Types
    "EntityId",
    "NonBlankStr",
    "NonNegativeDecimal",
    "PositiveInt",
    # Validation
    "ValidationMixin",
    "build_entity",
    "normalize_facilities",
    "parse_amount",
    "parse_iso_date",
    "revise_entity",
]
