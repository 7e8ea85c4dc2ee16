# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
RentDesk Core Framework

Foundational building blocks: primitives and the error taxonomy.
"""

from . import primitives
from .errors import ConflictError, NotFoundError, RentDeskError, ValidationError

__all__ = [
    "primitives",
    "RentDeskError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
]
