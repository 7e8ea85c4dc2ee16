# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
In-memory entity store with copy-and-swap mutation.

The store owns one immutable snapshot. Every mutation builds a complete new
snapshot and replaces the old one in a single assignment, so a reader that
fetched a collection keeps a consistent view no matter what is committed
afterwards.

The Tenant/Room link is kept in an assignment table (room id -> tenant id).
``Room.tenant_id``, ``Room.status == OCCUPIED`` and ``Tenant.room_id`` are
projected from that table on every commit and are never taken from the
records passed in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Type, Union

from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..core.primitives import EntityKindEnum, RoomStatusEnum
from ..entities import (
    Entity,
    MaintenanceRequest,
    Notification,
    Payment,
    Room,
    Tenant,
)

logger = logging.getLogger(__name__)

KindLike = Union[EntityKindEnum, str]

COLLECTION_TYPES: Dict[EntityKindEnum, Type[Entity]] = {
    EntityKindEnum.TENANTS: Tenant,
    EntityKindEnum.ROOMS: Room,
    EntityKindEnum.PAYMENTS: Payment,
    EntityKindEnum.MAINTENANCE: MaintenanceRequest,
    EntityKindEnum.NOTIFICATIONS: Notification,
}


def to_kind(kind: KindLike) -> EntityKindEnum:
    try:
        return EntityKindEnum(kind)
    except ValueError as e:
        raise ValidationError(f"Unknown collection '{kind}'", field="kind") from e


@dataclass(frozen=True)
class StoreSnapshot:
    """
    One consistent, immutable state of every collection.

    Attributes:
        collections: Ordered records per kind
        assignments: Room id -> tenant id
        version: Number of commits that produced this snapshot
    """

    collections: Mapping[EntityKindEnum, Tuple[Entity, ...]] = field(
        default_factory=lambda: MappingProxyType(
            {kind: () for kind in EntityKindEnum}
        )
    )
    assignments: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    version: int = 0
    _index: Mapping[EntityKindEnum, Mapping[str, Entity]] = field(
        default_factory=lambda: MappingProxyType({kind: {} for kind in EntityKindEnum}),
        repr=False,
        compare=False,
    )

    def get(self, kind: KindLike) -> Tuple[Entity, ...]:
        return self.collections[to_kind(kind)]

    def find(self, kind: KindLike, entity_id: Optional[str]) -> Optional[Entity]:
        if entity_id is None:
            return None
        return self._index[to_kind(kind)].get(entity_id)


class EntityStore:
    """
    Sole owner of the Tenant, Room, Payment, Maintenance and Notification
    collections for one session.

    Components receive the store explicitly and read through ``get``/``find``.
    All writes go through ``replace`` or ``commit`` with freshly built
    collections; records returned by the store are frozen and are never
    edited in place.

    Example:
        >>> store = EntityStore(rooms=[Room(number="101", price=500)])
        >>> len(store.get("rooms"))
        1
    """

    def __init__(
        self,
        tenants: Iterable[Tenant] = (),
        rooms: Iterable[Room] = (),
        payments: Iterable[Payment] = (),
        maintenance: Iterable[MaintenanceRequest] = (),
        notifications: Iterable[Notification] = (),
        assignments: Optional[Mapping[str, str]] = None,
    ):
        tenants = tuple(tenants)
        rooms = tuple(rooms)
        if assignments is None:
            assignments = self._seed_assignments(tenants, rooms)

        self._snapshot = StoreSnapshot()
        self.commit(
            {
                EntityKindEnum.TENANTS: tenants,
                EntityKindEnum.ROOMS: rooms,
                EntityKindEnum.PAYMENTS: payments,
                EntityKindEnum.MAINTENANCE: maintenance,
                EntityKindEnum.NOTIFICATIONS: notifications,
            },
            assignments=assignments,
        )

    # --- Read access ---

    @property
    def snapshot(self) -> StoreSnapshot:
        return self._snapshot

    @property
    def version(self) -> int:
        return self._snapshot.version

    @property
    def assignments(self) -> Mapping[str, str]:
        """Read-only view of room id -> tenant id."""
        return self._snapshot.assignments

    def get(self, kind: KindLike) -> Tuple[Entity, ...]:
        """Ordered collection for ``kind``."""
        return self._snapshot.get(kind)

    def find(self, kind: KindLike, entity_id: Optional[str]) -> Optional[Entity]:
        """Record with ``entity_id``, or None when absent."""
        return self._snapshot.find(kind, entity_id)

    def require(self, kind: KindLike, entity_id: Optional[str]) -> Entity:
        """Record with ``entity_id``; raises NotFoundError when absent."""
        kind = to_kind(kind)
        entity = self._snapshot.find(kind, entity_id)
        if entity is None:
            raise NotFoundError(kind, entity_id)
        return entity

    def tenant_for_room(self, room_id: str) -> Optional[str]:
        return self._snapshot.assignments.get(room_id)

    def room_for_tenant(self, tenant_id: str) -> Optional[str]:
        for room_id, assigned in self._snapshot.assignments.items():
            if assigned == tenant_id:
                return room_id
        return None

    # --- Mutation ---

    def replace(self, kind: KindLike, collection: Iterable[Entity]) -> StoreSnapshot:
        """Atomically swap one collection."""
        return self.commit({to_kind(kind): collection})

    def commit(
        self,
        changes: Mapping[KindLike, Iterable[Entity]],
        assignments: Optional[Mapping[str, str]] = None,
    ) -> StoreSnapshot:
        """
        Atomically swap several collections and, optionally, the assignment
        table.

        The new snapshot is fully built and checked before it becomes
        visible. If any check fails the store is left unchanged.

        Args:
            changes: New collections keyed by kind
            assignments: Replacement room id -> tenant id table

        Returns:
            The snapshot now visible to readers

        Raises:
            ConflictError: Duplicate ids, or a tenant assigned to two rooms
            ValidationError: A record of the wrong type for its collection
        """
        current = self._snapshot
        collections: Dict[EntityKindEnum, Tuple[Entity, ...]] = dict(
            current.collections
        )
        index: Dict[EntityKindEnum, Mapping[str, Entity]] = dict(current._index)

        changed = set()
        for raw_kind, records in changes.items():
            kind = to_kind(raw_kind)
            records = tuple(records)
            self._check_types(kind, records)
            collections[kind] = records
            changed.add(kind)

        table = dict(current.assignments if assignments is None else assignments)
        links_changed = assignments is not None

        if {EntityKindEnum.ROOMS, EntityKindEnum.TENANTS} & changed or links_changed:
            room_ids = {room.id for room in collections[EntityKindEnum.ROOMS]}
            for room_id in [r for r in table if r not in room_ids]:
                logger.debug(f"Dropping assignment for removed room '{room_id}'")
                del table[room_id]
            self._check_assignments(table)
            collections[EntityKindEnum.ROOMS] = self._project_rooms(
                collections[EntityKindEnum.ROOMS], table
            )
            collections[EntityKindEnum.TENANTS] = self._project_tenants(
                collections[EntityKindEnum.TENANTS], table
            )
            changed.update({EntityKindEnum.ROOMS, EntityKindEnum.TENANTS})

        for kind in changed:
            index[kind] = self._build_index(kind, collections[kind])

        snapshot = StoreSnapshot(
            collections=MappingProxyType(collections),
            assignments=MappingProxyType(table),
            version=current.version + 1,
            _index=MappingProxyType(index),
        )
        self._snapshot = snapshot
        logger.debug(
            f"Committed store version {snapshot.version}: "
            f"{', '.join(sorted(kind.value for kind in changed)) or 'no collections'}"
        )
        return snapshot

    # --- Internal helpers ---

    @staticmethod
    def _seed_assignments(
        tenants: Tuple[Tenant, ...], rooms: Tuple[Room, ...]
    ) -> Dict[str, str]:
        """Build the assignment table from seed records' pointer fields."""
        table: Dict[str, str] = {}
        for room in rooms:
            if room.tenant_id is not None:
                table[room.id] = room.tenant_id
        for tenant in tenants:
            if tenant.room_id is None:
                continue
            linked = table.get(tenant.room_id)
            if linked is not None and linked != tenant.id:
                raise ConflictError(
                    f"Room '{tenant.room_id}' is linked to both tenant "
                    f"'{linked}' and tenant '{tenant.id}'"
                )
            table[tenant.room_id] = tenant.id
        return table

    @staticmethod
    def _check_types(kind: EntityKindEnum, records: Tuple[Any, ...]) -> None:
        expected = COLLECTION_TYPES[kind]
        for record in records:
            if not isinstance(record, expected):
                raise ValidationError(
                    f"{kind.value} collection only holds {expected.__name__} "
                    f"records, got {type(record).__name__}"
                )

    @staticmethod
    def _build_index(
        kind: EntityKindEnum, records: Tuple[Entity, ...]
    ) -> Mapping[str, Entity]:
        index: Dict[str, Entity] = {}
        for record in records:
            if record.id in index:
                raise ConflictError(f"Duplicate {kind.value} id '{record.id}'")
            index[record.id] = record
        return MappingProxyType(index)

    @staticmethod
    def _check_assignments(table: Mapping[str, str]) -> None:
        seen: Dict[str, str] = {}
        for room_id, tenant_id in table.items():
            if tenant_id in seen:
                raise ConflictError(
                    f"Tenant '{tenant_id}' cannot occupy both room "
                    f"'{seen[tenant_id]}' and room '{room_id}'"
                )
            seen[tenant_id] = room_id

    @staticmethod
    def _project_rooms(
        rooms: Tuple[Room, ...], table: Mapping[str, str]
    ) -> Tuple[Room, ...]:
        projected = []
        for room in rooms:
            tenant_id = table.get(room.id)
            if tenant_id is not None:
                status = RoomStatusEnum.OCCUPIED
            elif room.status == RoomStatusEnum.OCCUPIED:
                status = RoomStatusEnum.VACANT
            else:
                status = room.status

            if room.tenant_id == tenant_id and room.status == status:
                projected.append(room)
            else:
                projected.append(room.revise(status=status, tenant_id=tenant_id))
        return tuple(projected)

    @staticmethod
    def _project_tenants(
        tenants: Tuple[Tenant, ...], table: Mapping[str, str]
    ) -> Tuple[Tenant, ...]:
        room_by_tenant = {tenant_id: room_id for room_id, tenant_id in table.items()}
        projected = []
        for tenant in tenants:
            room_id = room_by_tenant.get(tenant.id)
            if tenant.room_id == room_id:
                projected.append(tenant)
            else:
                projected.append(tenant.copy(updates={"room_id": room_id}))
        return tuple(projected)
