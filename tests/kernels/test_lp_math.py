# [TESTER] v1

from __future__ import annotations

import pytest

from simpleswap.errors import (
    ArithmeticOverflow,
    InsufficientInitialLiquidity,
    InvalidAmount,
    InvariantViolation,
)
from simpleswap.kernels.isqrt import integer_sqrt
from simpleswap.kernels.lp_math import (
    MINIMUM_LIQUIDITY,
    burn_liquidity,
    mint_liquidity,
    mint_liquidity_initial,
    optimal_liquidity,
)

E18 = 10**18


def test_initial_mint_burns_the_floor() -> None:
    minted = mint_liquidity_initial(amount_a=1000 * E18, amount_b=1000 * E18)
    assert minted == integer_sqrt(1000 * E18 * 1000 * E18) - MINIMUM_LIQUIDITY


def test_initial_mint_must_clear_the_floor() -> None:
    with pytest.raises(InsufficientInitialLiquidity):
        mint_liquidity_initial(amount_a=1000, amount_b=1000)
    assert mint_liquidity_initial(amount_a=1001, amount_b=1001) == 1


def test_initial_mint_with_a_zero_side_is_insufficient() -> None:
    with pytest.raises(InsufficientInitialLiquidity):
        mint_liquidity_initial(amount_a=0, amount_b=10 * E18)


def test_initial_mint_rejects_overflowing_product() -> None:
    with pytest.raises(ArithmeticOverflow):
        mint_liquidity_initial(amount_a=1 << 200, amount_b=1 << 200)


def test_mint_rejects_inconsistent_initial_state() -> None:
    with pytest.raises(InvariantViolation):
        mint_liquidity(
            reserve_a=1,
            reserve_b=1,
            total_shares=0,
            amount_a_desired=10_000,
            amount_b_desired=10_000,
        )


def test_optimal_liquidity_keeps_reserve_ratio() -> None:
    opt = optimal_liquidity(reserve_a=1000, reserve_b=2000, amount_a_desired=100, amount_b_desired=500)
    assert (opt.amount_a_used, opt.amount_b_used) == (100, 200)
    assert (opt.amount_a_refund, opt.amount_b_refund) == (0, 300)

    opt = optimal_liquidity(reserve_a=1000, reserve_b=2000, amount_a_desired=500, amount_b_desired=200)
    assert (opt.amount_a_used, opt.amount_b_used) == (100, 200)


def test_subsequent_mint_is_proportional() -> None:
    supply = 1000 * E18 - MINIMUM_LIQUIDITY
    res = mint_liquidity(
        reserve_a=1000 * E18,
        reserve_b=1000 * E18,
        total_shares=supply,
        amount_a_desired=500 * E18,
        amount_b_desired=500 * E18,
    )
    assert res.shares_minted == 500 * E18 * supply // (1000 * E18)
    assert (res.amount_a_used, res.amount_b_used) == (500 * E18, 500 * E18)
    assert res.new_total_shares == supply + res.shares_minted


def test_disagreeing_share_counts_clamp_the_larger_side() -> None:
    # Ratio-preserving amounts are (500, 3), implying 500 vs 428 shares.
    res = mint_liquidity(
        reserve_a=1000,
        reserve_b=7,
        total_shares=1000,
        amount_a_desired=500,
        amount_b_desired=10,
    )
    assert res.shares_minted == 428
    assert res.amount_a_used == 428
    assert res.amount_b_used == 3
    assert (res.new_reserve_a, res.new_reserve_b, res.new_total_shares) == (1428, 10, 1428)


def test_dust_deposit_mints_nothing_and_is_rejected() -> None:
    with pytest.raises(InvalidAmount):
        mint_liquidity(
            reserve_a=10**30,
            reserve_b=10**30,
            total_shares=10**6,
            amount_a_desired=1,
            amount_b_desired=1,
        )


def test_burn_is_floor_and_full_burn_is_exact() -> None:
    res = burn_liquidity(shares_in=1, reserve_a=10, reserve_b=7, total_shares=3)
    assert (res.amount_a_out, res.amount_b_out) == (3, 2)

    res = burn_liquidity(shares_in=3, reserve_a=10, reserve_b=7, total_shares=3)
    assert (res.amount_a_out, res.amount_b_out) == (10, 7)
    assert (res.new_reserve_a, res.new_reserve_b, res.new_total_shares) == (0, 0, 0)


def test_burn_rejects_bad_share_amounts() -> None:
    with pytest.raises(ValueError):
        burn_liquidity(shares_in=0, reserve_a=10, reserve_b=10, total_shares=10)
    with pytest.raises(ValueError):
        burn_liquidity(shares_in=11, reserve_a=10, reserve_b=10, total_shares=10)
