# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk filter/query engine.

Generic, order-preserving predicate filtering plus display-row enrichment
for list screens.
"""

from .filters import (
    ALL,
    DateRange,
    Flag,
    Predicate,
    StatusEquals,
    TextMatch,
    filter_records,
    read_field,
)
from .rows import (
    MaintenanceRow,
    PaymentRow,
    TenantRow,
    maintenance_rows,
    payment_rows,
    room_number,
    tenant_name,
    tenant_rows,
)

__all__ = [
    "ALL",
    "DateRange",
    "Flag",
    "MaintenanceRow",
    "PaymentRow",
    "Predicate",
    "StatusEquals",
    "TenantRow",
    "TextMatch",
    "filter_records",
    "maintenance_rows",
    "payment_rows",
    "read_field",
    "room_number",
    "tenant_name",
    "tenant_rows",
]
