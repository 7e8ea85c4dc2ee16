# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest

from rentdesk.core.errors import NotFoundError
from rentdesk.core.primitives import PaymentStatusEnum
from rentdesk.rules import (
    apply_payment_status,
    derive_payment_status,
    derive_tenant_payment_status,
    is_past_due,
)
from tests.conftest import make_payment, make_tenant


def _payments(*statuses, tenant_id="t1"):
    payments = []
    for i, status in enumerate(statuses):
        extra = {"date": "2024-03-10"} if status == "paid" else {}
        payments.append(
            make_payment(f"p{i}", tenant_id=tenant_id, status=status, **extra)
        )
    return payments


@pytest.mark.parametrize(
    "statuses,expected",
    [
        (("overdue", "paid"), PaymentStatusEnum.OVERDUE),
        (("pending", "paid"), PaymentStatusEnum.PENDING),
        (("paid",), PaymentStatusEnum.PAID),
        ((), PaymentStatusEnum.PAID),
        (("pending", "overdue", "paid"), PaymentStatusEnum.OVERDUE),
    ],
)
def test_derive_payment_status(statuses, expected):
    assert derive_payment_status(_payments(*statuses), "t1") == expected


def test_other_tenants_payments_ignored():
    payments = _payments("overdue", tenant_id="t2")
    assert derive_payment_status(payments, "t1") == PaymentStatusEnum.PAID


def test_derive_tenant_payment_status_reads_store(store):
    store.replace("payments", _payments("pending", tenant_id="t2"))

    assert derive_tenant_payment_status(store, "t2") == PaymentStatusEnum.PENDING
    with pytest.raises(NotFoundError):
        derive_tenant_payment_status(store, "ghost")


def test_apply_payment_status_rewrites_only_targets():
    tenants = [make_tenant("t1"), make_tenant("t2")]
    payments = _payments("overdue", tenant_id="t1") + [
        make_payment("px", tenant_id="t2", status="pending")
    ]

    updated = apply_payment_status(tenants, payments, ["t1", "ghost"])

    assert [t.id for t in updated] == ["t1", "t2"]
    assert updated[0].payment_status == PaymentStatusEnum.OVERDUE
    assert updated[1] is tenants[1]


class TestIsPastDue:
    def test_pending_after_due_date(self):
        assert is_past_due(make_payment(due_date="2024-03-05"), date(2024, 3, 6))

    def test_due_today_is_not_past_due(self):
        assert not is_past_due(make_payment(due_date="2024-03-05"), date(2024, 3, 5))

    @pytest.mark.parametrize("status", ["overdue", "paid"])
    def test_only_pending_payments(self, status):
        extra = {"date": "2024-03-01"} if status == "paid" else {}
        payment = make_payment(due_date="2024-03-05", status=status, **extra)
        assert not is_past_due(payment, date(2024, 4, 1))
