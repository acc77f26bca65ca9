from __future__ import annotations

from dragshift.geometry import ORIGIN, Position, absolute, add, is_equal, negate, patch, subtract


def test_vector_arithmetic() -> None:
    a = Position(3.0, -4.0)
    b = Position(1.0, 2.0)
    assert add(a, b) == Position(4.0, -2.0)
    assert subtract(a, b) == Position(2.0, -6.0)
    assert negate(a) == Position(-3.0, 4.0)
    assert absolute(a) == Position(3.0, 4.0)
    assert is_equal(add(a, negate(a)), ORIGIN)


def test_patch_sets_one_line() -> None:
    assert patch("y", 120.0) == Position(0.0, 120.0)
    assert patch("x", 5.0, 7.0) == Position(5.0, 7.0)
    assert Position(2.0, 9.0).get("y") == 9.0
