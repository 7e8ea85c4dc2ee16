# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any, Iterable

from ..core.errors import ConflictError
from ..core.primitives import (
    EntityKindEnum,
    RoomStatusEnum,
    RoomTypeEnum,
    build_entity,
    revise_entity,
)
from ..entities import Room
from ..store import EntityStore
from ._collections import reject_fields, remove_record, replace_record, to_enum

logger = logging.getLogger(__name__)

# Owned by the assignment table
PROTECTED_FIELDS = ("id", "tenant_id")


def add_room(
    store: EntityStore,
    number: str,
    price: Any,
    floor: str = "",
    type: Any = RoomTypeEnum.SINGLE,
    status: Any = RoomStatusEnum.VACANT,
    facilities: Iterable[str] = (),
) -> Room:
    """
    Create a room.

    A blank price becomes 0. A new room is vacant or under maintenance;
    occupancy only comes from assigning a tenant.

    Raises:
        ConflictError: ``status`` is occupied
        ValidationError: Blank number, negative or non-numeric price, or an
            unknown type/status
    """
    status = to_enum(RoomStatusEnum, status, "status")
    if status == RoomStatusEnum.OCCUPIED:
        raise ConflictError("A room becomes occupied only by assigning a tenant")

    room = build_entity(
        Room,
        number=number,
        price=price,
        floor=floor,
        type=to_enum(RoomTypeEnum, type, "type"),
        status=status,
        facilities=facilities,
    )
    store.replace(EntityKindEnum.ROOMS, store.get(EntityKindEnum.ROOMS) + (room,))
    logger.debug(f"Added room '{room.id}' ({room.number})")
    return room


def update_room(store: EntityStore, room_id: str, **updates: Any) -> Room:
    """
    Apply form edits to a room.

    Status may only move between vacant and maintenance here; occupancy is
    changed by assign/unassign.

    Raises:
        NotFoundError: Unknown room
        ConflictError: The edit would occupy or vacate the room directly
        ValidationError: An invalid value, or an attempt to write ``tenant_id``
    """
    room = store.require(EntityKindEnum.ROOMS, room_id)
    reject_fields(updates, PROTECTED_FIELDS)

    if "type" in updates:
        updates["type"] = to_enum(RoomTypeEnum, updates["type"], "type")
    if "status" in updates:
        target = to_enum(RoomStatusEnum, updates["status"], "status")
        occupied = room.status == RoomStatusEnum.OCCUPIED
        if occupied and target != RoomStatusEnum.OCCUPIED:
            raise ConflictError(
                f"Room {room.number} is occupied; unassign the tenant first"
            )
        if not occupied and target == RoomStatusEnum.OCCUPIED:
            raise ConflictError("A room becomes occupied only by assigning a tenant")
        updates["status"] = target

    updated = revise_entity(room, **updates)
    store.replace(
        EntityKindEnum.ROOMS, replace_record(store.get(EntityKindEnum.ROOMS), updated)
    )
    logger.debug(f"Updated room '{room_id}': {', '.join(sorted(updates))}")
    return updated


def delete_room(store: EntityStore, room_id: str) -> None:
    """
    Remove a room that has no tenant.

    Raises:
        NotFoundError: Unknown room
        ConflictError: The room is occupied
    """
    room = store.require(EntityKindEnum.ROOMS, room_id)
    if room.status == RoomStatusEnum.OCCUPIED:
        raise ConflictError(
            f"Room {room.number} is occupied; unassign the tenant before deleting"
        )
    store.replace(
        EntityKindEnum.ROOMS, remove_record(store.get(EntityKindEnum.ROOMS), room_id)
    )
    logger.debug(f"Deleted room '{room_id}'")


def start_room_maintenance(store: EntityStore, room_id: str) -> Room:
    """
    Take a vacant room out of service. Already under maintenance is a no-op.

    Raises:
        NotFoundError: Unknown room
        ConflictError: The room is occupied
    """
    room = store.require(EntityKindEnum.ROOMS, room_id)
    if room.status == RoomStatusEnum.MAINTENANCE:
        return room
    return update_room(store, room_id, status=RoomStatusEnum.MAINTENANCE)


def end_room_maintenance(store: EntityStore, room_id: str) -> Room:
    """
    Return a room under maintenance to vacant. A vacant room is a no-op.

    Raises:
        NotFoundError: Unknown room
        ConflictError: The room is occupied
    """
    room = store.require(EntityKindEnum.ROOMS, room_id)
    if room.status == RoomStatusEnum.VACANT:
        return room
    return update_room(store, room_id, status=RoomStatusEnum.VACANT)
