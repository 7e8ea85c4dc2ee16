# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any

from ..core.primitives import (
    EntityKindEnum,
    TenantStatusEnum,
    build_entity,
    revise_entity,
)
from ..entities import Tenant
from ..rules import derive_payment_status
from ..store import EntityStore
from ._collections import reject_fields, remove_record, replace_record, to_enum

logger = logging.getLogger(__name__)

# Owned by the assignment table and by payment status derivation
PROTECTED_FIELDS = ("id", "room_id", "payment_status")


def add_tenant(
    store: EntityStore,
    name: str,
    email: str = "",
    phone: str = "",
    start_date: Any = None,
    end_date: Any = None,
    status: Any = TenantStatusEnum.ACTIVE,
) -> Tenant:
    """
    Create a tenant with no room.

    The derived payment status is computed from any payments that already
    reference the new id (normally none, so PAID).

    Raises:
        ValidationError: Blank name, malformed dates or an inverted lease window
    """
    tenant = build_entity(
        Tenant,
        name=name,
        email=email,
        phone=phone,
        start_date=start_date,
        end_date=end_date,
        status=to_enum(TenantStatusEnum, status, "status"),
    )
    tenant = tenant.copy(
        updates={
            "payment_status": derive_payment_status(
                store.get(EntityKindEnum.PAYMENTS), tenant.id
            )
        }
    )
    store.replace(EntityKindEnum.TENANTS, store.get(EntityKindEnum.TENANTS) + (tenant,))
    logger.debug(f"Added tenant '{tenant.id}'")
    return tenant


def update_tenant(store: EntityStore, tenant_id: str, **updates: Any) -> Tenant:
    """
    Apply form edits to a tenant.

    Raises:
        NotFoundError: Unknown tenant
        ValidationError: An invalid value, or an attempt to write ``room_id``
            or ``payment_status``
    """
    tenant = store.require(EntityKindEnum.TENANTS, tenant_id)
    reject_fields(updates, PROTECTED_FIELDS)
    if "status" in updates:
        updates["status"] = to_enum(TenantStatusEnum, updates["status"], "status")

    updated = revise_entity(tenant, **updates)
    store.replace(
        EntityKindEnum.TENANTS,
        replace_record(store.get(EntityKindEnum.TENANTS), updated),
    )
    logger.debug(f"Updated tenant '{tenant_id}': {', '.join(sorted(updates))}")
    return updated


def delete_tenant(store: EntityStore, tenant_id: str) -> None:
    """
    Remove a tenant.

    Deletion does not cascade: a room or payment still referencing the
    tenant keeps the id and shows the placeholder label.

    Raises:
        NotFoundError: Unknown tenant
    """
    store.require(EntityKindEnum.TENANTS, tenant_id)
    store.replace(
        EntityKindEnum.TENANTS,
        remove_record(store.get(EntityKindEnum.TENANTS), tenant_id),
    )
    if store.room_for_tenant(tenant_id) is not None:
        logger.warning(f"Deleted tenant '{tenant_id}' while still assigned to a room")
    else:
        logger.debug(f"Deleted tenant '{tenant_id}'")
