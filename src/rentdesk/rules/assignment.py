# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant/Room assignment.

Both operations edit only the store's assignment table; the store projects
the change onto ``Room.tenant_id``, ``Room.status`` and ``Tenant.room_id``
in the same commit.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.errors import ConflictError
from ..core.primitives import EntityKindEnum, RoomStatusEnum
from ..store import EntityStore, StoreSnapshot

logger = logging.getLogger(__name__)


def assign(store: EntityStore, tenant_id: str, room_id: str) -> StoreSnapshot:
    """
    Move ``tenant_id`` into ``room_id``.

    Raises:
        NotFoundError: Either id is absent from the store
        ConflictError: The room is not vacant or the tenant already has a room
    """
    tenant = store.require(EntityKindEnum.TENANTS, tenant_id)
    room = store.require(EntityKindEnum.ROOMS, room_id)

    if room.status != RoomStatusEnum.VACANT:
        logger.info(f"Rejected assignment to {room.status.value} room '{room_id}'")
        raise ConflictError(
            f"Room {room.number} is {room.status.value}, only a vacant room can be assigned"
        )
    if tenant.room_id is not None:
        logger.info(f"Rejected assignment of already housed tenant '{tenant_id}'")
        raise ConflictError(
            f"Tenant {tenant.name} already occupies room '{tenant.room_id}'"
        )

    table = dict(store.assignments)
    table[room_id] = tenant_id
    snapshot = store.commit({}, assignments=table)
    logger.debug(f"Assigned tenant '{tenant_id}' to room '{room_id}'")
    return snapshot


def unassign(
    store: EntityStore, room_id: str, tenant_id: Optional[str] = None
) -> StoreSnapshot:
    """
    Clear the link on ``room_id`` and return the room to vacant.

    When ``tenant_id`` is given it must be the tenant currently linked to the
    room; otherwise the request is stale and nothing changes. Unassigning a
    room with no tenant is also a no-op.

    Raises:
        NotFoundError: The room is absent from the store
    """
    store.require(EntityKindEnum.ROOMS, room_id)

    linked = store.tenant_for_room(room_id)
    if linked is None:
        logger.debug(f"Room '{room_id}' has no tenant; nothing to unassign")
        return store.snapshot
    if tenant_id is not None and tenant_id != linked:
        logger.debug(
            f"Ignoring stale unassign of tenant '{tenant_id}' from room '{room_id}'"
        )
        return store.snapshot

    table = dict(store.assignments)
    del table[room_id]
    snapshot = store.commit({}, assignments=table)
    logger.debug(f"Unassigned tenant '{linked}' from room '{room_id}'")
    return snapshot
