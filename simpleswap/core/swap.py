"""
Swap operations against a ledger snapshot.
"""

from __future__ import annotations

from ..config import PoolConfig
from ..errors import InsufficientLiquidity
from ..kernels.cpmm_swap import SwapExactInResult, swap_exact_in
from ..kernels.uint256 import require_uint
from ..state.ledger import Amount, AssetId, LedgerState
from .guards import check_minimum


def compute_swap_exact_in(
    state: LedgerState,
    asset_in: AssetId,
    amount_in: Amount,
    amount_out_min: Amount,
    config: PoolConfig,
) -> SwapExactInResult:
    """
    Price an exact-in swap of *asset_in* for the pool's other asset.

    The result is expressed in swap direction (reserve_in/reserve_out),
    not in the pool's canonical order.

    Raises:
        InsufficientLiquidity: If the pool is not seeded
        InvalidAmount: If amount_in is not positive
        SlippageExceeded: If amount_out < amount_out_min
    """
    require_uint("amount_out_min", amount_out_min, max_value=config.max_amount)

    if asset_in == state.asset_a:
        reserve_in, reserve_out = state.reserve_a, state.reserve_b
    else:
        reserve_in, reserve_out = state.reserve_b, state.reserve_a

    if reserve_in == 0 or reserve_out == 0:
        raise InsufficientLiquidity("pool has no liquidity")

    res = swap_exact_in(
        reserve_in=reserve_in,
        reserve_out=reserve_out,
        amount_in=amount_in,
        max_value=config.max_amount,
    )
    check_minimum("amount_out", res.amount_out, amount_out_min)
    return res
