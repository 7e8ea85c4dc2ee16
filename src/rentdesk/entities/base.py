# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from uuid import uuid4

from pydantic import Field

from ..core.primitives import EntityId, Model


def new_id() -> str:
    """Opaque identifier for a new record."""
    return uuid4().hex


class Entity(Model):
    """
    Base class for every stored record.

    Attributes:
        id: Opaque string identifier, stable for the record's lifetime
    """

    id: EntityId = Field(default_factory=new_id)
