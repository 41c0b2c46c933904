"""
Fee-free constant-product swap kernel.

Pricing:
    amount_out = floor(amount_in * reserve_out / (reserve_in + amount_in))

Post-swap reserves:
    new_reserve_in = reserve_in + amount_in
    new_reserve_out = reserve_out - amount_out

Floor rounding leaves any residue in the pool, so
``new_reserve_in * new_reserve_out >= reserve_in * reserve_out`` always holds.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InsufficientLiquidity, InvalidAmount
from .uint256 import MAX_UINT256, checked_add, checked_mul, mul_div_floor, require_uint


@dataclass(frozen=True)
class SwapExactInResult:
    amount_in: int
    amount_out: int
    new_reserve_in: int
    new_reserve_out: int
    k_before: int
    k_after: int


def get_amount_out(
    *,
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    max_value: int = MAX_UINT256,
) -> int:
    """
    Quote the output of an exact-in swap. Pure; touches no state.

    Raises:
        InsufficientLiquidity: If either reserve is zero
        ArithmeticOverflow: If an input or intermediate leaves the domain
    """
    for name, v in (
        ("amount_in", amount_in),
        ("reserve_in", reserve_in),
        ("reserve_out", reserve_out),
    ):
        require_uint(name, v, max_value=max_value)

    if reserve_in == 0 or reserve_out == 0:
        raise InsufficientLiquidity("reserves must be positive to price a swap")

    numerator = checked_mul(amount_in, reserve_out, max_value=max_value)
    denominator = checked_add(reserve_in, amount_in, max_value=max_value)
    return numerator // denominator


def swap_exact_in(
    *,
    reserve_in: int,
    reserve_out: int,
    amount_in: int,
    max_value: int = MAX_UINT256,
) -> SwapExactInResult:
    """
    Compute an exact-in swap and the resulting reserves.

    Raises:
        InvalidAmount: If amount_in is not positive
        InsufficientLiquidity: If either reserve is zero
        ArithmeticOverflow: If an input or intermediate leaves the domain
    """
    require_uint("amount_in", amount_in, max_value=max_value)
    if amount_in == 0:
        raise InvalidAmount("amount_in must be positive")

    amount_out = get_amount_out(
        amount_in=amount_in,
        reserve_in=reserve_in,
        reserve_out=reserve_out,
        max_value=max_value,
    )

    new_reserve_in = checked_add(reserve_in, amount_in, max_value=max_value)
    new_reserve_out = reserve_out - amount_out
    if new_reserve_out <= 0:
        raise AssertionError("swap drained the output reserve")

    k_before = reserve_in * reserve_out
    k_after = new_reserve_in * new_reserve_out
    if k_after < k_before:
        raise AssertionError(f"k decreased: {k_after} < {k_before}")

    return SwapExactInResult(
        amount_in=amount_in,
        amount_out=amount_out,
        new_reserve_in=new_reserve_in,
        new_reserve_out=new_reserve_out,
        k_before=k_before,
        k_after=k_after,
    )


def spot_price(*, reserve_base: int, reserve_quote: int, scale: int, max_value: int = MAX_UINT256) -> int:
    """
    Price of one base unit in quote units, scaled: ``reserve_quote * scale // reserve_base``.

    Raises:
        InsufficientLiquidity: If either reserve is zero
        ArithmeticOverflow: If reserve_quote * scale leaves the domain
    """
    require_uint("reserve_base", reserve_base, max_value=max_value)
    require_uint("reserve_quote", reserve_quote, max_value=max_value)
    if reserve_base == 0 or reserve_quote == 0:
        raise InsufficientLiquidity("pool has no reserves to price")
    return mul_div_floor(reserve_quote, scale, reserve_base, max_value=max_value)
