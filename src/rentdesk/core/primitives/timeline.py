# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

import pandas as pd
from pydantic import field_validator

from .model import Model
from .types import PositiveInt


@dataclass(frozen=True, slots=True)
class MonthBucket:
    """
    One calendar month of a reporting window.

    Attributes:
        period: Monthly pandas Period
        start: First instant of the month
        end: Last instant of the month
        label: Display label, e.g. "Mar 2024"
    """

    period: pd.Period
    start: pd.Timestamp
    end: pd.Timestamp
    label: str

    def contains(self, value: Optional[date]) -> bool:
        if value is None:
            return False
        return pd.Period(value, freq="M") == self.period


class Timeline(Model):
    """
    A run of consecutive calendar months used to bucket records for reporting.

    Attributes:
        start_date: First month of the timeline.
        duration_months: Number of months; zero yields an empty timeline.

    Examples:
        >>> timeline = Timeline.trailing(date(2024, 3, 10), 6)
        >>> [str(p) for p in timeline.period_index][:2]
        ['2023-10', '2023-11']
    """

    start_date: Optional[pd.Period] = None
    duration_months: PositiveInt

    @field_validator("start_date", mode="before")
    @classmethod
    def normalize_start_date(cls, v: Union[date, pd.Period, None]) -> pd.Period:
        """Ensure start_date is a monthly pd.Period."""
        if v is None:
            return None
        if isinstance(v, pd.Period) and v.freqstr != "M":
            return pd.Period(v.to_timestamp(), freq="M")
        if isinstance(v, pd.Period):
            return v
        return pd.Period(v, freq="M")

    @property
    def end_date(self) -> Optional[pd.Period]:
        """Last month of the timeline, or None when it is empty."""
        if self.start_date is None or self.duration_months == 0:
            return None
        return self.start_date + (self.duration_months - 1)

    @property
    def period_index(self) -> pd.PeriodIndex:
        """Monthly PeriodIndex for the timeline, oldest first."""
        if self.start_date is None or self.duration_months == 0:
            return pd.PeriodIndex([], freq="M")
        return pd.period_range(
            start=self.start_date, periods=self.duration_months, freq="M"
        )

    def buckets(self, label_format: str = "%b %Y") -> List[MonthBucket]:
        """Month buckets for the timeline, oldest first."""
        return [
            MonthBucket(
                period=period,
                start=period.start_time,
                end=period.end_time,
                label=period.strftime(label_format),
            )
            for period in self.period_index
        ]

    def align_series(self, series: pd.Series, fill_value=0) -> pd.Series:
        """
        Align a monthly series to this timeline, filling missing months.

        Args:
            series: Series indexed by monthly Period
            fill_value: Value used for months absent from ``series``

        Returns:
            Series reindexed to the timeline's period index
        """
        return series.reindex(self.period_index, fill_value=fill_value)

    @classmethod
    def trailing(cls, as_of: Union[date, pd.Period], months: int) -> "Timeline":
        """
        Create the timeline of ``months`` calendar months ending with the
        month containing ``as_of``.
        """
        end_period = pd.Period(as_of, freq="M")
        if months <= 0:
            return cls(start_date=end_period, duration_months=0)
        return cls(start_date=end_period - (months - 1), duration_months=months)

    @classmethod
    def from_dates(
        cls,
        start_date: Union[date, pd.Period],
        end_date: Union[date, pd.Period],
    ) -> "Timeline":
        """Create a timeline spanning the months of two dates, inclusive."""
        start_period = pd.Period(start_date, freq="M")
        end_period = pd.Period(end_date, freq="M")
        duration = len(pd.period_range(start=start_period, end=end_period, freq="M"))
        return cls(start_date=start_period, duration_months=duration)
