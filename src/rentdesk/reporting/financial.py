# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly financial and occupancy report.

Rolls payment and room records up into trailing calendar-month buckets:

- Payments are bucketed by the month of their recorded ``date``; payments
  never recorded (no ``date``) fall outside every bucket.
- Each bucket sums amounts by status into revenue (paid), pending and
  overdue. Empty buckets report 0.
- Occupancy is a snapshot of the current rooms, so every bucket in a report
  carries the same figure. Room history is not tracked.
- Outstanding pending/overdue totals cover the whole payment collection,
  independent of the window.

All sums are ``Decimal``.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, List, Optional, Tuple

import pandas as pd

from ..core.errors import ValidationError
from ..core.primitives import (
    GlobalSettings,
    PaymentStatusEnum,
    RoomStatusEnum,
    Timeline,
    parse_iso_date,
)
from ..entities import Payment, Room

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


@dataclass(frozen=True)
class ReportRow:
    """
    Totals for one calendar month.

    Attributes:
        period: Monthly pandas Period
        label: Display label, e.g. "Mar 2024"
        revenue: Sum of paid amounts recorded in the month
        pending: Sum of pending amounts recorded in the month
        overdue: Sum of overdue amounts recorded in the month
        occupancy_rate: Current occupied rooms as a whole percent
    """

    period: pd.Period
    label: str
    revenue: Decimal
    pending: Decimal
    overdue: Decimal
    occupancy_rate: int


@dataclass(frozen=True)
class FinancialReport:
    """
    A trailing-window report, rows oldest first.

    Attributes:
        rows: One row per calendar month in the window
        as_of: Date whose month closes the window
        total_revenue: Sum of revenue over the rows
        average_revenue: ``total_revenue`` per row; 0 for an empty window
        total_pending: Pending amount across all payments
        total_overdue: Overdue amount across all payments
        occupancy_rate: Current occupancy percent
    """

    rows: Tuple[ReportRow, ...]
    as_of: datetime.date
    total_revenue: Decimal
    average_revenue: Decimal
    total_pending: Decimal
    total_overdue: Decimal
    occupancy_rate: int

    @property
    def window_months(self) -> int:
        return len(self.rows)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Rows as a DataFrame indexed by monthly Period, for chart layers.

        Columns: label, revenue, pending, overdue, occupancy_rate.
        """
        columns = ["label", "revenue", "pending", "overdue", "occupancy_rate"]
        frame = pd.DataFrame(
            [[getattr(row, name) for name in columns] for row in self.rows],
            columns=columns,
            index=pd.PeriodIndex([row.period for row in self.rows], freq="M"),
        )
        frame.index.name = "period"
        return frame


def _decimal_sum(values: Iterable[Any]) -> Decimal:
    return sum((_as_decimal(v) for v in values), ZERO)


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def occupancy_rate(rooms: Iterable[Room]) -> int:
    """
    Occupied rooms as a whole percent, rounded half-up.

    An empty room collection yields 0.
    """
    rooms = tuple(rooms)
    if not rooms:
        return 0
    occupied = sum(1 for room in rooms if room.status == RoomStatusEnum.OCCUPIED)
    rate = Decimal(occupied) * 100 / Decimal(len(rooms))
    return int(rate.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def outstanding_total(payments: Iterable[Payment], status: PaymentStatusEnum) -> Decimal:
    """Sum of ``status`` amounts across all payments, dated or not."""
    return _decimal_sum(p.amount for p in payments if p.status == status)


def monthly_totals(
    payments: Iterable[Payment], status: PaymentStatusEnum, timeline: Timeline
) -> pd.Series:
    """
    Sum of ``status`` amounts per month of ``timeline``.

    Payments without a recorded date are skipped. Months with no payments
    are filled with 0.
    """
    dated = [p for p in payments if p.date is not None and p.status == status]
    series = pd.Series(
        [p.amount for p in dated],
        index=pd.PeriodIndex([pd.Period(p.date, freq="M") for p in dated], freq="M"),
        dtype=object,
    )
    totals = series.groupby(level=0).agg(_decimal_sum)
    return timeline.align_series(totals, fill_value=ZERO)


def _check_window(window_months: Any) -> int:
    if isinstance(window_months, bool) or not isinstance(window_months, int):
        raise ValidationError(
            f"window_months must be a whole number, got {window_months!r}",
            field="window_months",
        )
    if window_months < 0:
        raise ValidationError(
            f"window_months cannot be negative, got {window_months}",
            field="window_months",
        )
    return window_months


def build_financial_report(
    payments: Iterable[Payment],
    rooms: Iterable[Room],
    window_months: Optional[int] = None,
    as_of: Any = None,
    settings: Optional[GlobalSettings] = None,
) -> FinancialReport:
    """
    Build the trailing-window financial report.

    Args:
        payments: Full payment collection
        rooms: Full room collection
        window_months: Number of calendar months; defaults to the reporting
            setting (6)
        as_of: Date whose month is the most recent bucket; defaults to today
            in the reporting timezone
        settings: Global settings

    Returns:
        FinancialReport with rows oldest first

    Raises:
        ValidationError: Negative or non-integer window, or malformed ``as_of``

    Example:
        >>> report = build_financial_report(store.get("payments"),
        ...                                 store.get("rooms"),
        ...                                 as_of="2024-03-31")
        >>> [row.label for row in report.rows][-1]
        'Mar 2024'
    """
    settings = settings or GlobalSettings()
    payments = tuple(payments)
    rooms = tuple(rooms)

    window = _check_window(
        settings.reporting.window_months if window_months is None else window_months
    )
    as_of_date = parse_iso_date(as_of, "as_of", required=False)
    if as_of_date is None:
        as_of_date = settings.reporting.today()

    timeline = Timeline.trailing(as_of_date, window)
    revenue = monthly_totals(payments, PaymentStatusEnum.PAID, timeline)
    pending = monthly_totals(payments, PaymentStatusEnum.PENDING, timeline)
    overdue = monthly_totals(payments, PaymentStatusEnum.OVERDUE, timeline)
    occupancy = occupancy_rate(rooms)

    rows: List[ReportRow] = [
        ReportRow(
            period=bucket.period,
            label=bucket.label,
            revenue=_as_decimal(revenue[bucket.period]),
            pending=_as_decimal(pending[bucket.period]),
            overdue=_as_decimal(overdue[bucket.period]),
            occupancy_rate=occupancy,
        )
        for bucket in timeline.buckets(settings.reporting.bucket_label_format)
    ]

    total_revenue = _decimal_sum(row.revenue for row in rows)
    average_revenue = total_revenue / len(rows) if rows else ZERO

    report = FinancialReport(
        rows=tuple(rows),
        as_of=as_of_date,
        total_revenue=total_revenue,
        average_revenue=average_revenue,
        total_pending=outstanding_total(payments, PaymentStatusEnum.PENDING),
        total_overdue=outstanding_total(payments, PaymentStatusEnum.OVERDUE),
        occupancy_rate=occupancy,
    )
    logger.debug(
        f"Built {window}-month report to {as_of_date.isoformat()}: "
        f"revenue {total_revenue}, occupancy {occupancy}%"
    )
    return report
