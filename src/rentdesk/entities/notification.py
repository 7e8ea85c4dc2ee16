# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import datetime

from ..core.primitives import (
    NonBlankStr,
    NotificationPriorityEnum,
    NotificationTypeEnum,
)
from .base import Entity


class Notification(Entity):
    """An alert shown in the notification feed."""

    title: NonBlankStr
    message: str = ""
    type: NotificationTypeEnum = NotificationTypeEnum.SYSTEM
    priority: NotificationPriorityEnum = NotificationPriorityEnum.NORMAL
    date: datetime.datetime
    read: bool = False
