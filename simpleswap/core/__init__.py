"""
Pool engine: guards, liquidity and swap operations, and the Pool façade
"""

from .guards import check_deadline, check_minimum, check_pair, check_path
from .liquidity import compute_add_liquidity, compute_remove_liquidity
from .pool import Pool, system_clock
from .swap import compute_swap_exact_in
from .types import AddLiquidityResult, Operation, PoolEvent, RemoveLiquidityResult, SwapResult

__all__ = [
    "check_deadline",
    "check_minimum",
    "check_pair",
    "check_path",
    "compute_add_liquidity",
    "compute_remove_liquidity",
    "compute_swap_exact_in",
    "Pool",
    "system_clock",
    "AddLiquidityResult",
    "Operation",
    "PoolEvent",
    "RemoveLiquidityResult",
    "SwapResult",
]
