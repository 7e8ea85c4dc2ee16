# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any

from ..core.primitives import (
    EntityKindEnum,
    NotificationPriorityEnum,
    NotificationTypeEnum,
    build_entity,
)
from ..entities import Notification
from ..store import EntityStore
from ._collections import replace_record, to_enum

logger = logging.getLogger(__name__)


def add_notification(
    store: EntityStore,
    title: str,
    date: Any,
    message: str = "",
    type: Any = NotificationTypeEnum.SYSTEM,
    priority: Any = NotificationPriorityEnum.NORMAL,
) -> Notification:
    notification = build_entity(
        Notification,
        title=title,
        date=date,
        message=message,
        type=to_enum(NotificationTypeEnum, type, "type"),
        priority=to_enum(NotificationPriorityEnum, priority, "priority"),
    )
    store.replace(
        EntityKindEnum.NOTIFICATIONS,
        store.get(EntityKindEnum.NOTIFICATIONS) + (notification,),
    )
    logger.debug(f"Added {notification.type.value} notification '{notification.id}'")
    return notification


def mark_notification_read(store: EntityStore, notification_id: str) -> Notification:
    """
    Flag a notification as read. Already read is a no-op.

    Raises:
        NotFoundError: Unknown notification
    """
    notification = store.require(EntityKindEnum.NOTIFICATIONS, notification_id)
    if notification.read:
        return notification

    updated = notification.copy(updates={"read": True})
    store.replace(
        EntityKindEnum.NOTIFICATIONS,
        replace_record(store.get(EntityKindEnum.NOTIFICATIONS), updated),
    )
    return updated


def mark_all_notifications_read(store: EntityStore) -> int:
    """Flag every notification as read; returns how many changed."""
    notifications = store.get(EntityKindEnum.NOTIFICATIONS)
    unread = sum(1 for n in notifications if not n.read)
    if unread:
        store.replace(
            EntityKindEnum.NOTIFICATIONS,
            tuple(n if n.read else n.copy(updates={"read": True}) for n in notifications),
        )
        logger.debug(f"Marked {unread} notification(s) read")
    return unread


def unread_count(store: EntityStore) -> int:
    return sum(1 for n in store.get(EntityKindEnum.NOTIFICATIONS) if not n.read)
