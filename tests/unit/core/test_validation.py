# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from rentdesk.core.errors import ValidationError
from rentdesk.core.primitives import (
    build_entity,
    normalize_facilities,
    parse_amount,
    parse_iso_date,
    revise_entity,
)
from rentdesk.entities import Room


class TestParseIsoDate:
    def test_parses_normalized_string(self):
        assert parse_iso_date("2024-03-10") == date(2024, 3, 10)

    def test_passes_dates_through(self):
        assert parse_iso_date(date(2024, 3, 10)) == date(2024, 3, 10)

    def test_truncates_datetime(self):
        assert parse_iso_date(datetime(2024, 3, 10, 15, 30)) == date(2024, 3, 10)

    @pytest.mark.parametrize("value", ["03/10/2024", "2024-3-10", "10 March 2024", 20240310])
    def test_rejects_other_formats(self, value):
        with pytest.raises(ValidationError):
            parse_iso_date(value)

    def test_rejects_impossible_calendar_date(self):
        with pytest.raises(ValidationError, match="calendar date"):
            parse_iso_date("2024-02-30")

    def test_blank_required_is_error(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_iso_date("", "due_date")
        assert exc_info.value.field == "due_date"

    def test_blank_optional_is_none(self):
        assert parse_iso_date("  ", required=False) is None
        assert parse_iso_date(None, required=False) is None


class TestParseAmount:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_becomes_zero(self, value):
        assert parse_amount(value) == Decimal(0)

    def test_float_goes_through_string_form(self):
        assert parse_amount(0.1) == Decimal("0.1")

    def test_numeric_string(self):
        assert parse_amount(" 499.50 ") == Decimal("499.50")

    @pytest.mark.parametrize("value", [-1, "-0.01", Decimal("-5")])
    def test_rejects_negative(self, value):
        with pytest.raises(ValidationError, match="negative"):
            parse_amount(value)

    @pytest.mark.parametrize("value", ["abc", True, float("nan"), "inf", [500]])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(ValidationError):
            parse_amount(value)


def test_normalize_facilities_trims_and_dedupes():
    assert normalize_facilities([" WiFi", "AC", "WiFi", "", "TV "]) == ("WiFi", "AC", "TV")
    assert normalize_facilities(None) == ()
    assert normalize_facilities("AC") == ("AC",)


def test_build_entity_raises_rentdesk_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        build_entity(Room, number="101", price="-20")

    assert exc_info.value.field == "price"
    assert "negative" in str(exc_info.value)


def test_revise_entity_raises_rentdesk_validation_error():
    room = Room(number="101", price=500)

    with pytest.raises(ValidationError):
        revise_entity(room, number="")
    assert revise_entity(room, price="").price == Decimal(0)
