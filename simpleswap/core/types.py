"""Result and event records for the pool façade.

All types are frozen dataclasses. Amounts are scaled integers in smallest units.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Tuple


@unique
class Operation(Enum):
    ADD_LIQUIDITY = "add_liquidity"
    REMOVE_LIQUIDITY = "remove_liquidity"
    SWAP_EXACT_IN = "swap_exact_in"


@dataclass(frozen=True)
class PoolEvent:
    """Event record emitted after a successful mutating call.

    `amounts` pairs each asset with its signed change as seen by the pool
    (positive = into the pool). `shares` is the number of shares minted or
    burned (0 for swaps); `price` is the post-operation price of asset_a in
    asset_b, scaled, or 0 when the pool ends empty.
    """

    operation: Operation
    caller: str
    recipient: str
    amounts: Tuple[Tuple[str, int], ...]
    shares: int
    price: int
    reserves: Tuple[int, int]
    total_shares: int


@dataclass(frozen=True)
class AddLiquidityResult:
    amount_a_used: int
    amount_b_used: int
    shares_minted: int
    event: PoolEvent

    def __iter__(self):
        return iter((self.amount_a_used, self.amount_b_used, self.shares_minted))


@dataclass(frozen=True)
class RemoveLiquidityResult:
    amount_a_out: int
    amount_b_out: int
    shares_burned: int
    event: PoolEvent

    def __iter__(self):
        return iter((self.amount_a_out, self.amount_b_out))


@dataclass(frozen=True)
class SwapResult:
    amount_in: int
    amount_out: int
    asset_in: str
    asset_out: str
    event: PoolEvent
