# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pandas as pd
import pytest
from pydantic import ValidationError as PydanticValidationError

from rentdesk.core.errors import ValidationError
from rentdesk.core.primitives import GlobalSettings, ReportingSettings
from rentdesk.reporting import build_financial_report, occupancy_rate
from tests.conftest import make_payment, make_room


@pytest.fixture
def payments():
    return (
        make_payment("p1", amount="500", status="paid", date="2024-03-10"),
        make_payment("p2", amount="450.25", status="paid", date="2024-03-28"),
        make_payment("p3", amount="300", status="pending", date="2024-03-02"),
        make_payment("p4", amount="200", status="overdue", date="2024-01-15"),
        make_payment("p5", amount="600", status="paid", date="2024-01-05"),
        # Outside a 6-month window ending March 2024
        make_payment("p6", amount="999", status="paid", date="2023-09-30"),
        # Never recorded
        make_payment("p7", amount="125", status="pending"),
        make_payment("p8", amount="75", status="overdue"),
    )


@pytest.fixture
def rooms():
    return (
        make_room("r1", status="occupied", tenant_id="t1"),
        make_room("r2"),
        make_room("r3", status="maintenance"),
    )


def _revenue_in_window(payments, start, end):
    return sum(
        (p.amount for p in payments if p.status.value == "paid" and p.date and start <= p.date <= end),
        Decimal(0),
    )


class TestBuckets:
    def test_rows_are_oldest_first(self, payments, rooms):
        report = build_financial_report(payments, rooms, as_of="2024-03-31")

        assert [row.label for row in report.rows] == [
            "Oct 2023",
            "Nov 2023",
            "Dec 2023",
            "Jan 2024",
            "Feb 2024",
            "Mar 2024",
        ]
        assert report.window_months == 6

    def test_bucket_sums_by_status(self, payments, rooms):
        report = build_financial_report(payments, rooms, as_of="2024-03-15")
        by_label = {row.label: row for row in report.rows}

        march = by_label["Mar 2024"]
        assert march.revenue == Decimal("950.25")
        assert march.pending == Decimal("300")
        assert march.overdue == Decimal("0")

        january = by_label["Jan 2024"]
        assert january.revenue == Decimal("600")
        assert january.overdue == Decimal("200")

    def test_empty_buckets_are_zero(self, payments, rooms):
        """Four of six months have no payments."""
        report = build_financial_report(payments, rooms, as_of="2024-03-31")
        empty = [row for row in report.rows if row.label not in ("Jan 2024", "Mar 2024")]

        assert len(empty) == 4
        for row in empty:
            assert (row.revenue, row.pending, row.overdue) == (0, 0, 0)
            assert isinstance(row.revenue, Decimal)
        assert report.average_revenue == report.total_revenue / 6

    def test_sums_are_exact_decimals(self, rooms):
        payments = [
            make_payment(f"p{i}", amount=0.1, status="paid", date="2024-03-01") for i in range(3)
        ]

        report = build_financial_report(payments, rooms, as_of="2024-03-31")

        assert report.rows[-1].revenue == Decimal("0.3")
        assert report.total_revenue == Decimal("0.3")


class TestTotals:
    def test_total_revenue_matches_paid_in_window(self, payments, rooms):
        report = build_financial_report(payments, rooms, as_of="2024-03-31")

        expected = _revenue_in_window(payments, date(2023, 10, 1), date(2024, 3, 31))
        assert report.total_revenue == expected == Decimal("1550.25")
        assert report.average_revenue == expected / 6

    def test_widening_window_never_decreases_total(self, payments, rooms):
        totals = [
            build_financial_report(payments, rooms, window_months=n, as_of="2024-03-31").total_revenue
            for n in range(0, 13)
        ]

        assert totals == sorted(totals)
        assert totals[-1] == Decimal("2549.25")

    def test_outstanding_totals_ignore_window(self, payments, rooms):
        narrow = build_financial_report(payments, rooms, window_months=1, as_of="2024-03-31")
        wide = build_financial_report(payments, rooms, window_months=24, as_of="2024-03-31")

        for report in (narrow, wide):
            assert report.total_pending == Decimal("425")
            assert report.total_overdue == Decimal("275")

    def test_undated_payments_excluded_from_buckets(self, payments, rooms):
        report = build_financial_report(payments, rooms, window_months=24, as_of="2024-03-31")

        assert sum(row.pending for row in report.rows) == Decimal("300")
        assert sum(row.overdue for row in report.rows) == Decimal("200")

    def test_zero_window(self, payments, rooms):
        report = build_financial_report(payments, rooms, window_months=0, as_of="2024-03-31")

        assert report.rows == ()
        assert report.total_revenue == 0
        assert report.average_revenue == 0
        assert report.total_pending == Decimal("425")

    @pytest.mark.parametrize("window", [-1, 2.5, "6", True])
    def test_invalid_window(self, payments, rooms, window):
        with pytest.raises(ValidationError):
            build_financial_report(payments, rooms, window_months=window, as_of="2024-03-31")

    def test_empty_collections(self):
        report = build_financial_report([], [], as_of="2024-03-31")

        assert len(report.rows) == 6
        assert report.total_revenue == 0
        assert report.occupancy_rate == 0


class TestOccupancy:
    def test_snapshot_is_same_in_every_bucket(self, payments, rooms):
        report = build_financial_report(payments, rooms, as_of="2024-03-31")

        assert {row.occupancy_rate for row in report.rows} == {33}
        assert report.occupancy_rate == 33

    def test_rounds_half_up(self):
        rooms = [make_room("r0", status="occupied", tenant_id="t0")] + [
            make_room(f"r{i}") for i in range(1, 8)
        ]
        assert occupancy_rate(rooms) == 13

    def test_no_rooms(self):
        assert occupancy_rate([]) == 0


class TestSettings:
    def test_window_from_settings(self, payments, rooms):
        settings = GlobalSettings(reporting=ReportingSettings(window_months=3, bucket_label_format="%Y-%m"))

        report = build_financial_report(payments, rooms, as_of="2024-03-31", settings=settings)

        assert [row.label for row in report.rows] == ["2024-01", "2024-02", "2024-03"]

    def test_default_as_of_is_today_in_reference_timezone(self, rooms):
        report = build_financial_report([], rooms)

        today = pd.Timestamp.now(tz="UTC")
        assert report.rows[-1].period == pd.Period(today.date(), freq="M")

    def test_today_converts_aware_datetimes(self):
        settings = ReportingSettings(timezone="Asia/Kolkata")
        now = datetime(2024, 3, 31, 20, 0, tzinfo=timezone.utc)

        assert settings.today(now) == date(2024, 4, 1)

    def test_unknown_timezone(self):
        with pytest.raises(PydanticValidationError):
            ReportingSettings(timezone="Mars/Olympus")


def test_to_dataframe(payments, rooms):
    frame = build_financial_report(payments, rooms, as_of="2024-03-31").to_dataframe()

    assert list(frame.columns) == ["label", "revenue", "pending", "overdue", "occupancy_rate"]
    assert isinstance(frame.index, pd.PeriodIndex)
    assert frame.loc[pd.Period("2024-03", freq="M"), "revenue"] == Decimal("950.25")
