# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk reporting.

Aggregates payments and rooms into monthly financial rows and dashboard
figures. Reports only compute values; formatting belongs to the
presentation layer.
"""

from .dashboard import DashboardSummary, dashboard_summary
from .financial import (
    FinancialReport,
    ReportRow,
    build_financial_report,
    monthly_totals,
    occupancy_rate,
    outstanding_total,
)

__all__ = [
    "DashboardSummary",
    "FinancialReport",
    "ReportRow",
    "build_financial_report",
    "dashboard_summary",
    "monthly_totals",
    "occupancy_rate",
    "outstanding_total",
]
