# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any

from ..core.errors import ConflictError
from ..core.primitives import (
    EntityKindEnum,
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    build_entity,
)
from ..entities import MaintenanceRequest
from ..store import EntityStore
from ._collections import remove_record, replace_record, to_enum

logger = logging.getLogger(__name__)


def add_maintenance_request(
    store: EntityStore,
    room_id: str,
    title: str,
    date: Any,
    description: str = "",
    priority: Any = MaintenancePriorityEnum.NORMAL,
) -> MaintenanceRequest:
    """
    Open a maintenance request against an existing room.

    Raises:
        NotFoundError: Unknown room
        ValidationError: Blank title, malformed date or unknown priority
    """
    store.require(EntityKindEnum.ROOMS, room_id)
    request = build_entity(
        MaintenanceRequest,
        room_id=room_id,
        title=title,
        date=date,
        description=description,
        priority=to_enum(MaintenancePriorityEnum, priority, "priority"),
    )
    store.replace(
        EntityKindEnum.MAINTENANCE,
        store.get(EntityKindEnum.MAINTENANCE) + (request,),
    )
    logger.debug(f"Opened maintenance request '{request.id}' for room '{room_id}'")
    return request


def update_maintenance_status(
    store: EntityStore, request_id: str, status: Any
) -> MaintenanceRequest:
    """
    Advance a request: open -> in-progress -> completed.

    Setting the current status again is a no-op; stages may be skipped but
    never reversed.

    Raises:
        NotFoundError: Unknown request
        ConflictError: The move goes backwards
        ValidationError: Unknown status
    """
    request = store.require(EntityKindEnum.MAINTENANCE, request_id)
    target = to_enum(MaintenanceStatusEnum, status, "status")
    if target == request.status:
        return request
    if target.stage < request.status.stage:
        raise ConflictError(
            f"Maintenance request '{request_id}' cannot move from "
            f"{request.status.value} back to {target.value}"
        )

    updated = request.copy(updates={"status": target})
    store.replace(
        EntityKindEnum.MAINTENANCE,
        replace_record(store.get(EntityKindEnum.MAINTENANCE), updated),
    )
    logger.debug(f"Maintenance request '{request_id}' is now {target.value}")
    return updated


def delete_maintenance_request(store: EntityStore, request_id: str) -> None:
    store.require(EntityKindEnum.MAINTENANCE, request_id)
    store.replace(
        EntityKindEnum.MAINTENANCE,
        remove_record(store.get(EntityKindEnum.MAINTENANCE), request_id),
    )
    logger.debug(f"Deleted maintenance request '{request_id}'")
