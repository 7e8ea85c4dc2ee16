# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Boundary validation utilities shared by the entity models and workflows.

This module provides standardized handling for:
- Strict ``YYYY-MM-DD`` date parsing
- Money parsing (the single permitted "blank numeric -> 0" fallback)
- Facility list normalization
- Translating pydantic failures into RentDesk's ``ValidationError``
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_iso_date(
    value: Any, field_name: str = "date", required: bool = True
) -> Optional[date]:
    """
    Parse a form date into a ``datetime.date``.

    Only the normalized ``YYYY-MM-DD`` string form is accepted from text
    input. ``date`` and ``datetime`` objects pass through (the latter is
    truncated to its date).

    Args:
        value: Raw value from the form layer
        field_name: Field name used in error messages
        required: Whether a blank value is an error

    Returns:
        Parsed date, or None for a blank optional value

    Raises:
        ValidationError: If the value is missing (when required) or malformed
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise ValidationError(f"{field_name} is required", field=field_name)
        return None

    # datetime is a date subclass, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str) and ISO_DATE_PATTERN.match(value.strip()):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError(
                f"{field_name} is not a valid calendar date: {value!r}",
                field=field_name,
            ) from e

    raise ValidationError(
        f"{field_name} must be a YYYY-MM-DD date, got {value!r}", field=field_name
    )


def parse_amount(value: Any, field_name: str = "amount") -> Decimal:
    """
    Parse a form money value into a non-negative ``Decimal``.

    Blank input (None or an empty string) becomes ``Decimal(0)``. Floats are
    converted through their string form so ``0.1`` stays ``Decimal("0.1")``.

    Raises:
        ValidationError: For negative, non-finite or non-numeric input
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Decimal(0)

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be numeric", field=field_name)

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValidationError(
                f"{field_name} must be numeric, got {value!r}", field=field_name
            ) from e
    else:
        raise ValidationError(
            f"{field_name} must be numeric, got {type(value).__name__}",
            field=field_name,
        )

    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be finite", field=field_name)
    if amount < 0:
        raise ValidationError(
            f"{field_name} cannot be negative, got {amount}", field=field_name
        )
    return amount


def normalize_facilities(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Trim facility names, drop blanks and keep the first of any duplicates."""
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]

    seen = set()
    facilities = []
    for raw in values:
        name = str(raw).strip()
        if not name or name in seen:
            continue
        seen.add(name)
        facilities.append(name)
    return tuple(facilities)


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    This class can be inherited alongside Pydantic Model to add common
    validation patterns without code duplication.
    """

    @classmethod
    def validate_date_ordering(
        cls,
        data: Dict[str, Any],
        start_field: str,
        end_field: str,
        error_message: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Validate that the end date is not before the start date.

        Either field may be unset, in which case there is nothing to order.

        Raises:
            ValueError: If both dates are set and end precedes start
        """
        start_value = data.get(start_field)
        end_value = data.get(end_field)

        if start_value is None or end_value is None:
            return data

        start = parse_iso_date(start_value, start_field)
        end = parse_iso_date(end_value, end_field)
        if end < start:
            msg = error_message or f"{end_field} cannot be before {start_field}"
            raise ValueError(msg)

        return data


def _describe(error: PydanticValidationError) -> Tuple[str, Optional[str]]:
    details = error.errors()
    if not details:
        return str(error), None

    first = details[0]
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else None
    message = first.get("msg", str(error))
    # pydantic prefixes wrapped ValueErrors with "Value error, "
    if message.startswith("Value error, "):
        message = message[len("Value error, ") :]
    if field and field not in message:
        message = f"{field}: {message}"
    return message, field


def build_entity(model_cls: Type[ModelT], **data: Any) -> ModelT:
    """
    Construct ``model_cls`` from form data.

    Raises:
        ValidationError: With the first failing field, chained to the
            underlying pydantic error
    """
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as e:
        message, field = _describe(e)
        raise ValidationError(message, field=field) from e


def revise_entity(entity: ModelT, **updates: Any) -> ModelT:
    """Apply ``updates`` to ``entity`` with full re-validation."""
    try:
        return entity.revise(**updates)
    except PydanticValidationError as e:
        message, field = _describe(e)
        raise ValidationError(message, field=field) from e
