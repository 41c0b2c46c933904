"""`simpleswap`: a fee-free two-asset constant-product pool engine.

Deterministic, integer-only arithmetic over the uint256 domain. Every public
operation is guarded, computed against one ledger snapshot, and committed
atomically.

Public API:
- `Pool(asset_a, asset_b, config=..., clock=...)`
- `Pool.add_liquidity / remove_liquidity / swap_exact_in`
- `Pool.get_reserves / get_total_shares / get_share / get_price / get_amount_out`
- `integer_sqrt`, `get_amount_out` (pure kernels)
"""

from .config import PoolConfig, load_config
from .core import AddLiquidityResult, Operation, Pool, PoolEvent, RemoveLiquidityResult, SwapResult
from .errors import (
    ArithmeticOverflow,
    Expired,
    InsufficientInitialLiquidity,
    InsufficientLiquidity,
    InsufficientShares,
    InvalidAmount,
    InvalidPair,
    InvariantViolation,
    SimpleSwapError,
    SlippageExceeded,
)
from .kernels import MAX_UINT256, MINIMUM_LIQUIDITY, get_amount_out, integer_sqrt
from .units import format_units, parse_units

__all__ = [
    "PoolConfig",
    "load_config",
    "Pool",
    "AddLiquidityResult",
    "Operation",
    "PoolEvent",
    "RemoveLiquidityResult",
    "SwapResult",
    "ArithmeticOverflow",
    "Expired",
    "InsufficientInitialLiquidity",
    "InsufficientLiquidity",
    "InsufficientShares",
    "InvalidAmount",
    "InvalidPair",
    "InvariantViolation",
    "SimpleSwapError",
    "SlippageExceeded",
    "MAX_UINT256",
    "MINIMUM_LIQUIDITY",
    "get_amount_out",
    "integer_sqrt",
    "format_units",
    "parse_units",
]
