# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Predicate filters shared by every list screen.

``filter_records`` keeps the records that satisfy every predicate, in their
original order. Each predicate has a vacuous setting (empty query, the
``"all"`` sentinel, unset date bounds, no flag) that matches everything, so
controls can be combined independently.
"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple, TypeVar, Union

from ..core.primitives import enum_to_string, parse_iso_date

ALL = "all"

RecordT = TypeVar("RecordT")


def read_field(record: Any, name: str) -> Any:
    """Attribute ``name`` of ``record``, falling back to a mapping key."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class Predicate(ABC):
    """A single yes/no test applied to one record."""

    @abstractmethod
    def matches(self, record: Any) -> bool:
        pass

    def __call__(self, record: Any) -> bool:
        return self.matches(record)


@dataclass(frozen=True)
class TextMatch(Predicate):
    """
    Case-insensitive substring search across one or more fields.

    Attributes:
        query: Search text; blank matches every record
        fields: Field names searched; a record matches if any field contains
            the query
    """

    query: Optional[str]
    fields: Union[str, Sequence[str]]

    def __post_init__(self):
        if isinstance(self.fields, str):
            object.__setattr__(self, "fields", (self.fields,))
        else:
            object.__setattr__(self, "fields", tuple(self.fields))

    def matches(self, record: Any) -> bool:
        needle = (self.query or "").strip().lower()
        if not needle:
            return True
        return any(
            needle in enum_to_string(read_field(record, name)).lower()
            for name in self.fields
        )


@dataclass(frozen=True)
class StatusEquals(Predicate):
    """
    Exact match on an enum field.

    ``value`` of ``"all"`` (or None) matches unconditionally.
    """

    field: str
    value: Any = ALL

    def matches(self, record: Any) -> bool:
        if self.value is None or enum_to_string(self.value) == ALL:
            return True
        return enum_to_string(read_field(record, self.field)) == enum_to_string(
            self.value
        )


@dataclass(frozen=True)
class DateRange(Predicate):
    """
    Inclusive date containment: ``start <= record.field <= end``.

    An unset bound places no constraint. Bounds may be ``YYYY-MM-DD``
    strings or dates; comparison is always on parsed dates. A record whose
    field is empty fails any bounded range.
    """

    field: str
    start: Optional[Union[str, datetime.date]] = None
    end: Optional[Union[str, datetime.date]] = None

    def __post_init__(self):
        object.__setattr__(
            self, "start", parse_iso_date(self.start, "start", required=False)
        )
        object.__setattr__(self, "end", parse_iso_date(self.end, "end", required=False))

    @property
    def is_bounded(self) -> bool:
        return self.start is not None or self.end is not None

    def matches(self, record: Any) -> bool:
        if not self.is_bounded:
            return True

        value = read_field(record, self.field)
        if value is None or value == "":
            return False
        value = parse_iso_date(value, self.field)

        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


@dataclass(frozen=True)
class Flag(Predicate):
    """Boolean equality; ``value`` of None matches unconditionally."""

    field: str
    value: Optional[bool] = None

    def matches(self, record: Any) -> bool:
        if self.value is None:
            return True
        return bool(read_field(record, self.field)) == self.value


def filter_records(
    records: Iterable[RecordT], *predicates: Callable[[Any], bool]
) -> Tuple[RecordT, ...]:
    """
    Records satisfying every predicate, in their original order.

    With no predicates, or only vacuous ones, the full collection is returned
    unchanged.
    """
    return tuple(
        record
        for record in records
        if all(predicate(record) for predicate in predicates)
    )
