# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from rentdesk.core.primitives import Model


class _TestModel(Model):
    a: int
    b: str = "hello"


def test_model_is_frozen():
    """Test that the base Model is frozen and attributes cannot be changed after instantiation."""
    m = _TestModel(a=1)
    with pytest.raises(ValidationError):
        m.a = 2


def test_model_forbids_unknown_fields():
    with pytest.raises(ValidationError):
        _TestModel(a=1, c=3)


def test_model_copy_no_updates():
    """Test the copy() method without any updates."""
    m1 = _TestModel(a=1, b="original")
    m2 = m1.copy()

    assert m1 == m2
    assert m1 is not m2


def test_model_copy_with_partial_updates():
    m1 = _TestModel(a=1, b="original")
    m2 = m1.copy(updates={"a": 100})

    assert m1.a == 1
    assert m2.a == 100
    assert m2.b == "original"


def test_model_revise_revalidates():
    """revise() runs validation again, unlike copy()."""
    m1 = _TestModel(a=1)

    assert m1.revise(a="7").a == 7
    with pytest.raises(ValidationError):
        m1.revise(a="not a number")
