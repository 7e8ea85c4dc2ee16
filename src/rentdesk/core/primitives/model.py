# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; every change produces a new instance which is then
    swapped into the store as part of a fresh collection.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Entities are replaced, never edited in place
        extra="forbid",  # Catches typos and missing field definitions immediately
    )

    def copy(self, *, updates: Optional[Dict[str, Any]] = None) -> "Model":
        """
        Return a copy of the model (shorter alias for model_copy)

        Args:
            updates: Optional dictionary of field values to update

        Returns:
            A copy of the model with any specified updates
        """
        return self.model_copy(update=updates)

    def revise(self, **updates: Any) -> "Model":
        """
        Return a re-validated copy with ``updates`` applied.

        Unlike ``copy``, field validators run again, so form input merged
        into an existing entity is held to the same rules as a new one.
        """
        data = self.model_dump()
        data.update(updates)
        return type(self).model_validate(data)
