# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk consistency rules.

Keeps the Tenant/Room link consistent and derives tenant payment status.
"""

from .assignment import assign, unassign
from .status import (
    apply_payment_status,
    derive_payment_status,
    derive_tenant_payment_status,
    is_past_due,
)

__all__ = [
    "apply_payment_status",
    "assign",
    "derive_payment_status",
    "derive_tenant_payment_status",
    "is_past_due",
    "unassign",
]
