# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Derived payment status.

A tenant's ``payment_status`` is the worst status among their payments
(overdue > pending > paid) and is rewritten whenever one of those payments
changes.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Tuple

from ..core.primitives import EntityKindEnum, PaymentStatusEnum
from ..entities import Payment, Tenant
from ..store import EntityStore


def derive_payment_status(
    payments: Iterable[Payment], tenant_id: str
) -> PaymentStatusEnum:
    """
    Worst status among ``tenant_id``'s payments.

    A tenant with no payments is PAID.
    """
    worst = PaymentStatusEnum.PAID
    for payment in payments:
        if payment.tenant_id != tenant_id:
            continue
        if payment.status.severity > worst.severity:
            worst = payment.status
            if worst == PaymentStatusEnum.OVERDUE:
                break
    return worst


def derive_tenant_payment_status(
    store: EntityStore, tenant_id: str
) -> PaymentStatusEnum:
    """
    Derive ``tenant_id``'s payment status from the store's payments.

    Raises:
        NotFoundError: The tenant is absent from the store
    """
    store.require(EntityKindEnum.TENANTS, tenant_id)
    return derive_payment_status(store.get(EntityKindEnum.PAYMENTS), tenant_id)


def apply_payment_status(
    tenants: Iterable[Tenant],
    payments: Iterable[Payment],
    tenant_ids: Iterable[str],
) -> Tuple[Tenant, ...]:
    """
    Rewrite the derived status of the tenants in ``tenant_ids``.

    Returns a new tenant collection in the original order. Ids with no
    matching tenant (dangling payment references) are skipped.
    """
    payments = tuple(payments)
    targets = set(tenant_ids)
    updated = []
    for tenant in tenants:
        if tenant.id in targets:
            status = derive_payment_status(payments, tenant.id)
            if status != tenant.payment_status:
                tenant = tenant.copy(updates={"payment_status": status})
        updated.append(tenant)
    return tuple(updated)


def is_past_due(payment: Payment, as_of: date) -> bool:
    """
    Whether a pending payment should now be treated as overdue.

    The core exposes the predicate only; an external scheduler decides when
    to evaluate it and with which ``as_of`` date.
    """
    return payment.status == PaymentStatusEnum.PENDING and payment.due_date < as_of
