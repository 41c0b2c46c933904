"""
Liquidity operations: compute deposits and withdrawals against a ledger snapshot.

These functions are pure: they read a `LedgerState`, run the kernels and the
slippage checks, and return the kernel result for the caller to commit.
"""

from __future__ import annotations

from typing import Tuple

from ..config import PoolConfig
from ..errors import InsufficientShares
from ..kernels.lp_math import BurnLiquidityResult, MintLiquidityResult, burn_liquidity, mint_liquidity
from ..kernels.uint256 import require_int, require_uint
from ..state.ledger import Amount, LedgerState, Owner
from .guards import check_minimum


def _fields(name_a: str, name_b: str, reversed_pair: bool) -> Tuple[str, str]:
    if reversed_pair:
        return name_b, name_a
    return name_a, name_b


def compute_add_liquidity(
    state: LedgerState,
    amount_a_desired: Amount,
    amount_b_desired: Amount,
    amount_a_min: Amount,
    amount_b_min: Amount,
    config: PoolConfig,
    *,
    reversed_pair: bool = False,
) -> MintLiquidityResult:
    """
    Compute a deposit in the pool's canonical (a, b) order.

    First deposit (total_shares == 0):
        shares = integer_sqrt(amount_a * amount_b) - minimum_liquidity

    Subsequent deposits keep the reserve ratio:
        shares = min(amount_a_used * S // reserve_a, amount_b_used * S // reserve_b)

    Slippage errors name the side as the caller passed it: with *reversed_pair*
    the canonical a side is reported as ``amount_b_used`` and vice versa.

    Raises:
        InsufficientInitialLiquidity: If the first deposit does not clear the floor
        InvalidAmount: If a subsequent deposit is too small to mint any shares
        SlippageExceeded: If a used amount is below its minimum
        ArithmeticOverflow: If an intermediate leaves the configured domain
    """
    require_uint("amount_a_min", amount_a_min, max_value=config.max_amount)
    require_uint("amount_b_min", amount_b_min, max_value=config.max_amount)

    res = mint_liquidity(
        reserve_a=state.reserve_a,
        reserve_b=state.reserve_b,
        total_shares=state.total_shares,
        amount_a_desired=amount_a_desired,
        amount_b_desired=amount_b_desired,
        minimum_liquidity=config.minimum_liquidity,
        max_value=config.max_amount,
    )

    field_a, field_b = _fields("amount_a_used", "amount_b_used", reversed_pair)
    check_minimum(field_a, res.amount_a_used, amount_a_min)
    check_minimum(field_b, res.amount_b_used, amount_b_min)
    return res


def compute_remove_liquidity(
    state: LedgerState,
    owner: Owner,
    shares_in: Amount,
    amount_a_min: Amount,
    amount_b_min: Amount,
    config: PoolConfig,
    *,
    reversed_pair: bool = False,
) -> BurnLiquidityResult:
    """
    Compute a withdrawal in the pool's canonical (a, b) order.

    Outputs:
        amount_a_out = floor(shares_in * reserve_a / total_shares)
        amount_b_out = floor(shares_in * reserve_b / total_shares)

    Raises:
        InsufficientShares: If shares_in is not positive or exceeds owner's balance
        SlippageExceeded: If an output is below its minimum
    """
    require_int("shares_in", shares_in)
    require_uint("amount_a_min", amount_a_min, max_value=config.max_amount)
    require_uint("amount_b_min", amount_b_min, max_value=config.max_amount)

    if shares_in <= 0:
        raise InsufficientShares(f"shares_in must be positive: {shares_in}")
    balance = state.balances.get(owner, 0)
    if shares_in > balance:
        raise InsufficientShares(f"{owner} holds {balance} shares, cannot burn {shares_in}")

    res = burn_liquidity(
        shares_in=shares_in,
        reserve_a=state.reserve_a,
        reserve_b=state.reserve_b,
        total_shares=state.total_shares,
        max_value=config.max_amount,
    )

    field_a, field_b = _fields("amount_a_out", "amount_b_out", reversed_pair)
    check_minimum(field_a, res.amount_a_out, amount_a_min)
    check_minimum(field_b, res.amount_b_out, amount_b_min)
    return res
