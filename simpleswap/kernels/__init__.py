"""
Integer-only math kernels for the pool engine.
"""

from .cpmm_swap import SwapExactInResult, get_amount_out, spot_price, swap_exact_in
from .isqrt import integer_sqrt
from .lp_math import (
    MINIMUM_LIQUIDITY,
    BurnLiquidityResult,
    MintLiquidityResult,
    OptimalLiquidityResult,
    burn_liquidity,
    mint_liquidity,
    mint_liquidity_initial,
    optimal_liquidity,
)
from .uint256 import MAX_UINT256

__all__ = [
    "MAX_UINT256",
    "MINIMUM_LIQUIDITY",
    "SwapExactInResult",
    "get_amount_out",
    "spot_price",
    "swap_exact_in",
    "integer_sqrt",
    "BurnLiquidityResult",
    "MintLiquidityResult",
    "OptimalLiquidityResult",
    "burn_liquidity",
    "mint_liquidity",
    "mint_liquidity_initial",
    "optimal_liquidity",
]
