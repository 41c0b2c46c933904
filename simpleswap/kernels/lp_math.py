"""
Liquidity math kernel.

Pure functions with explicit rounding rules for share minting and burning.
Every division rounds in the pool's favour: depositors receive floor shares,
withdrawers receive floor amounts, and a clamped deposit side is rounded up.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InsufficientInitialLiquidity, InvalidAmount, InvariantViolation
from .isqrt import integer_sqrt
from .uint256 import MAX_UINT256, checked_add, checked_mul, mul_div_ceil, mul_div_floor, require_uint


MINIMUM_LIQUIDITY = 1000


@dataclass(frozen=True)
class OptimalLiquidityResult:
    amount_a_used: int
    amount_b_used: int
    amount_a_refund: int
    amount_b_refund: int


@dataclass(frozen=True)
class MintLiquidityResult:
    shares_minted: int
    amount_a_used: int
    amount_b_used: int
    new_reserve_a: int
    new_reserve_b: int
    new_total_shares: int


@dataclass(frozen=True)
class BurnLiquidityResult:
    amount_a_out: int
    amount_b_out: int
    new_reserve_a: int
    new_reserve_b: int
    new_total_shares: int


def optimal_liquidity(
    *,
    reserve_a: int,
    reserve_b: int,
    amount_a_desired: int,
    amount_b_desired: int,
    max_value: int = MAX_UINT256,
) -> OptimalLiquidityResult:
    """
    Compute ratio-preserving used amounts and refunds.

    For an empty pool (reserve_a == 0 or reserve_b == 0), uses everything and refunds nothing.
    Otherwise the side implying the smaller deposit is kept whole and the other
    side is scaled down to the reserve ratio (floor).
    """
    for name, v in (
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("amount_a_desired", amount_a_desired),
        ("amount_b_desired", amount_b_desired),
    ):
        require_uint(name, v, max_value=max_value)

    if reserve_a == 0 or reserve_b == 0:
        return OptimalLiquidityResult(
            amount_a_used=amount_a_desired,
            amount_b_used=amount_b_desired,
            amount_a_refund=0,
            amount_b_refund=0,
        )

    amount_b_optimal = mul_div_floor(amount_a_desired, reserve_b, reserve_a, max_value=max_value)
    if amount_b_optimal <= amount_b_desired:
        amount_a_used = amount_a_desired
        amount_b_used = amount_b_optimal
    else:
        amount_a_used = mul_div_floor(amount_b_desired, reserve_a, reserve_b, max_value=max_value)
        amount_b_used = amount_b_desired

    if amount_a_used > amount_a_desired or amount_b_used > amount_b_desired:
        raise AssertionError("used amounts exceed desired amounts")

    return OptimalLiquidityResult(
        amount_a_used=amount_a_used,
        amount_b_used=amount_b_used,
        amount_a_refund=amount_a_desired - amount_a_used,
        amount_b_refund=amount_b_desired - amount_b_used,
    )


def mint_liquidity_initial(
    *,
    amount_a: int,
    amount_b: int,
    minimum_liquidity: int = MINIMUM_LIQUIDITY,
    max_value: int = MAX_UINT256,
) -> int:
    """
    First-deposit mint: ``integer_sqrt(amount_a * amount_b) - minimum_liquidity``.

    The floor is burned, not credited: it is excluded from the returned share
    count and from total supply.
    """
    require_uint("amount_a", amount_a, max_value=max_value)
    require_uint("amount_b", amount_b, max_value=max_value)
    require_uint("minimum_liquidity", minimum_liquidity, max_value=max_value)

    root = integer_sqrt(checked_mul(amount_a, amount_b, max_value=max_value))
    if root <= minimum_liquidity:
        raise InsufficientInitialLiquidity(
            f"integer_sqrt(amount_a * amount_b) = {root} <= minimum liquidity {minimum_liquidity}"
        )
    return root - minimum_liquidity


def mint_liquidity(
    *,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
    amount_a_desired: int,
    amount_b_desired: int,
    minimum_liquidity: int = MINIMUM_LIQUIDITY,
    max_value: int = MAX_UINT256,
) -> MintLiquidityResult:
    """
    Mint shares for a deposit (Uniswap-v2 style, fee-free).

    Subsequent deposits mint ``min(a * S // reserve_a, b * S // reserve_b)``.
    When the two implied counts disagree, the side implying more shares is
    reduced to ``ceil(shares * reserve / S)`` so the depositor never pays for
    shares they do not receive and never receives more than they paid for.
    """
    for name, v in (
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("total_shares", total_shares),
        ("amount_a_desired", amount_a_desired),
        ("amount_b_desired", amount_b_desired),
    ):
        require_uint(name, v, max_value=max_value)

    if total_shares == 0:
        if reserve_a != 0 or reserve_b != 0:
            raise InvariantViolation(["inv_empty_iff_unseeded"])
        minted = mint_liquidity_initial(
            amount_a=amount_a_desired,
            amount_b=amount_b_desired,
            minimum_liquidity=minimum_liquidity,
            max_value=max_value,
        )
        return MintLiquidityResult(
            shares_minted=minted,
            amount_a_used=amount_a_desired,
            amount_b_used=amount_b_desired,
            new_reserve_a=amount_a_desired,
            new_reserve_b=amount_b_desired,
            new_total_shares=minted,
        )

    if reserve_a == 0 or reserve_b == 0:
        raise InvariantViolation(["inv_empty_iff_unseeded"])

    opt = optimal_liquidity(
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        amount_a_desired=amount_a_desired,
        amount_b_desired=amount_b_desired,
        max_value=max_value,
    )
    amount_a_used = opt.amount_a_used
    amount_b_used = opt.amount_b_used

    shares_a = mul_div_floor(amount_a_used, total_shares, reserve_a, max_value=max_value)
    shares_b = mul_div_floor(amount_b_used, total_shares, reserve_b, max_value=max_value)
    minted = min(shares_a, shares_b)
    if minted == 0:
        raise InvalidAmount("deposit too small to mint shares")

    if shares_a > minted:
        amount_a_used = mul_div_ceil(minted, reserve_a, total_shares, max_value=max_value)
    elif shares_b > minted:
        amount_b_used = mul_div_ceil(minted, reserve_b, total_shares, max_value=max_value)

    if amount_a_used > opt.amount_a_used or amount_b_used > opt.amount_b_used:
        raise AssertionError("clamped amounts exceed ratio-preserving amounts")

    return MintLiquidityResult(
        shares_minted=minted,
        amount_a_used=amount_a_used,
        amount_b_used=amount_b_used,
        new_reserve_a=checked_add(reserve_a, amount_a_used, max_value=max_value),
        new_reserve_b=checked_add(reserve_b, amount_b_used, max_value=max_value),
        new_total_shares=checked_add(total_shares, minted, max_value=max_value),
    )


def burn_liquidity(
    *,
    shares_in: int,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
    max_value: int = MAX_UINT256,
) -> BurnLiquidityResult:
    """
    Burn shares for underlying assets (floor rounding).

    Redeeming the whole supply returns the reserves exactly, leaving an empty pool.
    """
    for name, v in (
        ("shares_in", shares_in),
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("total_shares", total_shares),
    ):
        require_uint(name, v, max_value=max_value)

    if shares_in == 0:
        raise ValueError("shares_in must be positive")
    if total_shares == 0:
        raise ValueError("total_shares must be positive")
    if shares_in > total_shares:
        raise ValueError("cannot burn more than total_shares")

    amount_a_out = mul_div_floor(shares_in, reserve_a, total_shares, max_value=max_value)
    amount_b_out = mul_div_floor(shares_in, reserve_b, total_shares, max_value=max_value)

    return BurnLiquidityResult(
        amount_a_out=amount_a_out,
        amount_b_out=amount_b_out,
        new_reserve_a=reserve_a - amount_a_out,
        new_reserve_b=reserve_b - amount_b_out,
        new_total_shares=total_shares - shares_in,
    )
