# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pandas as pd
from pydantic import Field, field_validator

from .model import Model
from .types import PositiveInt


class ReportingSettings(Model):
    """Settings related to report generation."""

    window_months: PositiveInt = Field(
        default=6, description="Number of trailing calendar months in a report."
    )
    timezone: str = Field(
        default="UTC",
        description="Reference timezone used to decide which month 'today' falls in.",
    )
    bucket_label_format: str = Field(
        default="%b %Y", description="strftime format for month bucket labels."
    )

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            pd.Timestamp.now(tz=v)
        except Exception as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v

    def today(self, now: Optional[datetime] = None) -> date:
        """Current calendar date in the reference timezone."""
        if now is None:
            return pd.Timestamp.now(tz=self.timezone).date()
        stamp = pd.Timestamp(now)
        if stamp.tzinfo is None:
            return stamp.date()
        return stamp.tz_convert(self.timezone).date()


class DisplaySettings(Model):
    """Settings for rows handed to the presentation layer."""

    unknown_label: str = Field(
        default="Unknown",
        description="Placeholder shown for a reference to a missing record.",
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Grouped by functional area and passed explicitly to the operations that
    need them. Nothing in RentDesk reads settings from module globals.
    """

    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
