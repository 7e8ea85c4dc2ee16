# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping, Tuple, Type, TypeVar

from ..core.errors import ValidationError
from ..entities import Entity

EntityT = TypeVar("EntityT", bound=Entity)
EnumT = TypeVar("EnumT", bound=Enum)


def replace_record(records: Iterable[EntityT], record: EntityT) -> Tuple[EntityT, ...]:
    """New collection with the record sharing ``record.id`` swapped in place."""
    return tuple(record if item.id == record.id else item for item in records)


def remove_record(records: Iterable[EntityT], entity_id: str) -> Tuple[EntityT, ...]:
    return tuple(item for item in records if item.id != entity_id)


def to_enum(enum_cls: Type[EnumT], value: Any, field: str) -> EnumT:
    """Coerce a form value to ``enum_cls``; raises ValidationError if invalid."""
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"{field} must be one of: {choices}; got {value!r}", field=field
        ) from e


def reject_fields(updates: Mapping[str, Any], protected: Iterable[str]) -> None:
    """Raise ValidationError if ``updates`` touches a field owned elsewhere."""
    for name in protected:
        if name in updates:
            raise ValidationError(f"{name} cannot be edited directly", field=name)
