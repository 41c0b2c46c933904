"""Checked uint256 arithmetic.

Python ints never wrap, so the domain bound is enforced explicitly: every
helper raises ``ArithmeticOverflow`` when a result leaves ``[0, 2**256 - 1]``.
Subtraction below zero is not an overflow here; callers check for negative
results against their own error kinds.
"""

from __future__ import annotations

from ..errors import ArithmeticOverflow, InvalidAmount

MAX_UINT256: int = (1 << 256) - 1


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_uint(name: str, value: int, *, max_value: int = MAX_UINT256) -> None:
    """Check *value* is an int in ``[0, max_value]``.

    Negative values raise ``InvalidAmount`` (a ``ValueError``); values above the bound raise
    ``ArithmeticOverflow``.
    """
    require_int(name, value)
    if value < 0:
        raise InvalidAmount(f"{name} must be non-negative: {value}")
    if value > max_value:
        raise ArithmeticOverflow(f"{name} exceeds uint256 domain")


def checked_add(a: int, b: int, *, max_value: int = MAX_UINT256) -> int:
    out = a + b
    if out > max_value:
        raise ArithmeticOverflow(f"addition overflow: {a} + {b}")
    return out


def checked_mul(a: int, b: int, *, max_value: int = MAX_UINT256) -> int:
    out = a * b
    if out > max_value:
        raise ArithmeticOverflow(f"multiplication overflow: {a} * {b}")
    return out


def mul_div_floor(a: int, b: int, denominator: int, *, max_value: int = MAX_UINT256) -> int:
    """``floor(a * b / denominator)`` with the product checked against the domain."""
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    return checked_mul(a, b, max_value=max_value) // denominator


def mul_div_ceil(a: int, b: int, denominator: int, *, max_value: int = MAX_UINT256) -> int:
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    product = checked_mul(a, b, max_value=max_value)
    return (product + denominator - 1) // denominator
