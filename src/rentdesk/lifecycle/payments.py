# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment lifecycle.

Allowed transitions::

    pending -> paid
    pending -> overdue
    overdue -> paid

``paid`` is terminal. Every transition rewrites the owning tenant's derived
``payment_status`` in the same commit as the payment change.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Iterable, Optional, Tuple

from ..core.errors import ConflictError, ValidationError
from ..core.primitives import (
    EntityKindEnum,
    PaymentMethodEnum,
    PaymentStatusEnum,
    build_entity,
    parse_iso_date,
    revise_entity,
)
from ..entities import Payment
from ..rules import apply_payment_status, is_past_due
from ..store import EntityStore
from ._collections import remove_record, replace_record, to_enum

logger = logging.getLogger(__name__)


def _commit_payments(
    store: EntityStore, payments: Tuple[Payment, ...], tenant_ids: Iterable[str]
) -> None:
    tenants = apply_payment_status(
        store.get(EntityKindEnum.TENANTS), payments, tenant_ids
    )
    store.commit(
        {EntityKindEnum.PAYMENTS: payments, EntityKindEnum.TENANTS: tenants}
    )


def add_payment(
    store: EntityStore,
    tenant_id: str,
    room_id: str,
    amount: Any,
    due_date: Any,
    status: Any = PaymentStatusEnum.PENDING,
    date: Any = None,
    payment_method: Any = None,
    notes: str = "",
) -> Payment:
    """
    Create a payment record and re-derive the tenant's status.

    ``tenant_id`` and ``room_id`` are not checked against the store; a
    dangling reference is displayed as a placeholder.

    Raises:
        ValidationError: Malformed amount, dates, status or method
    """
    payment = build_entity(
        Payment,
        tenant_id=tenant_id,
        room_id=room_id,
        amount=amount,
        due_date=due_date,
        status=to_enum(PaymentStatusEnum, status, "status"),
        date=date,
        payment_method=payment_method,
        notes=notes,
    )
    payments = store.get(EntityKindEnum.PAYMENTS) + (payment,)
    _commit_payments(store, payments, [payment.tenant_id])
    logger.debug(f"Added {payment.status.value} payment '{payment.id}'")
    return payment


def record_payment(
    store: EntityStore,
    payment_id: str,
    date: Any,
    method: Any,
    notes: Optional[str] = None,
) -> Payment:
    """
    Record receipt of a pending or overdue payment.

    Args:
        store: Entity store
        payment_id: Payment being settled
        date: Date the money was received (``YYYY-MM-DD``)
        method: Payment method
        notes: Optional notes; existing notes are kept when omitted

    Returns:
        The updated payment

    Raises:
        NotFoundError: Unknown payment
        ConflictError: The payment is already paid
        ValidationError: Missing or malformed date or method
    """
    payment = store.require(EntityKindEnum.PAYMENTS, payment_id)
    if payment.status == PaymentStatusEnum.PAID:
        logger.info(f"Rejected repeat recording of paid payment '{payment_id}'")
        raise ConflictError(f"Payment '{payment_id}' has already been paid")

    paid_on = parse_iso_date(date, "date")
    if method is None or (isinstance(method, str) and not method.strip()):
        raise ValidationError("payment_method is required", field="payment_method")
    method = to_enum(
        PaymentMethodEnum,
        method.strip().lower() if isinstance(method, str) else method,
        "payment_method",
    )

    updated = revise_entity(
        payment,
        status=PaymentStatusEnum.PAID,
        date=paid_on,
        payment_method=method,
        notes=payment.notes if notes is None else notes,
    )
    payments = replace_record(store.get(EntityKindEnum.PAYMENTS), updated)
    _commit_payments(store, payments, [updated.tenant_id])
    logger.debug(f"Recorded payment '{payment_id}' on {paid_on.isoformat()}")
    return updated


def mark_overdue(store: EntityStore, payment_id: str) -> Payment:
    """
    Move a pending payment to overdue.

    Raises:
        NotFoundError: Unknown payment
        ConflictError: The payment is not pending
    """
    payment = store.require(EntityKindEnum.PAYMENTS, payment_id)
    if payment.status != PaymentStatusEnum.PENDING:
        raise ConflictError(
            f"Only a pending payment can become overdue; '{payment_id}' is "
            f"{payment.status.value}"
        )

    updated = payment.copy(updates={"status": PaymentStatusEnum.OVERDUE})
    payments = replace_record(store.get(EntityKindEnum.PAYMENTS), updated)
    _commit_payments(store, payments, [updated.tenant_id])
    logger.debug(f"Marked payment '{payment_id}' overdue")
    return updated


def mark_past_due(store: EntityStore, as_of: Any) -> Tuple[Payment, ...]:
    """
    Move every pending payment due before ``as_of`` to overdue in one commit.

    Intended for an external scheduler; the core never consults a clock.

    Returns:
        The payments that changed, in collection order
    """
    as_of = parse_iso_date(as_of, "as_of")
    changed = []
    payments = []
    for payment in store.get(EntityKindEnum.PAYMENTS):
        if is_past_due(payment, as_of):
            payment = payment.copy(updates={"status": PaymentStatusEnum.OVERDUE})
            changed.append(payment)
        payments.append(payment)

    if changed:
        _commit_payments(store, tuple(payments), {p.tenant_id for p in changed})
        logger.info(
            f"Marked {len(changed)} payment(s) overdue as of {as_of.isoformat()}"
        )
    return tuple(changed)


def delete_payment(store: EntityStore, payment_id: str) -> None:
    """
    Remove a payment and re-derive its tenant's status.

    Raises:
        NotFoundError: Unknown payment
    """
    payment = store.require(EntityKindEnum.PAYMENTS, payment_id)
    payments = remove_record(store.get(EntityKindEnum.PAYMENTS), payment_id)
    _commit_payments(store, payments, [payment.tenant_id])
    logger.debug(f"Deleted payment '{payment_id}'")


def payments_for_tenant(
    store: EntityStore, tenant_id: str
) -> Tuple[Payment, ...]:
    return tuple(
        p for p in store.get(EntityKindEnum.PAYMENTS) if p.tenant_id == tenant_id
    )


def due_within(
    payments: Iterable[Payment], start: datetime.date, end: datetime.date
) -> Tuple[Payment, ...]:
    """Outstanding payments whose due date lies in ``[start, end]``."""
    return tuple(
        p for p in payments if p.is_outstanding and start <= p.due_date <= end
    )
