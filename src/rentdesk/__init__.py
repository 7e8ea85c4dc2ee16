# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
RentDesk - Room-Rental Management Engine

Keeps tenant, room and payment records consistent and rolls them up into
monthly financial and occupancy reports for a management dashboard.

Key Entry Points:
- rentdesk.store.EntityStore - In-memory, copy-and-swap collections
- rentdesk.rules.assign() / unassign() - Tenant/Room assignment
- rentdesk.lifecycle.record_payment() - Payment lifecycle
- rentdesk.query.filter_records() - List-screen filtering
- rentdesk.reporting.build_financial_report() - Monthly report

Example Usage:
    ```python
    from rentdesk.store import EntityStore
    from rentdesk.lifecycle import add_room, add_tenant, add_payment, record_payment
    from rentdesk.rules import assign
    from rentdesk.reporting import build_financial_report

    store = EntityStore()
    room = add_room(store, number="101", price=500)
    tenant = add_tenant(store, name="Asha Rao")
    assign(store, tenant.id, room.id)

    payment = add_payment(store, tenant.id, room.id, amount=500, due_date="2024-03-05")
    record_payment(store, payment.id, date="2024-03-10", method="cash")

    report = build_financial_report(
        store.get("payments"), store.get("rooms"), as_of="2024-03-31"
    )
    print(report.total_revenue)
    ```
"""

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "entities",
    "lifecycle",
    "query",
    "reporting",
    "rules",
    "store",
]


_LAZY_MODULES = {
    "core": "rentdesk.core",
    "entities": "rentdesk.entities",
    "lifecycle": "rentdesk.lifecycle",
    "query": "rentdesk.query",
    "reporting": "rentdesk.reporting",
    "rules": "rentdesk.rules",
    "store": "rentdesk.store",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'rentdesk' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
