"""
Reserve ledger for a single two-asset pool.

The ledger is the only writer of pool state. State is held as an immutable
``LedgerState`` value; ``apply()`` builds a complete candidate state, checks
it, and only then swaps it in, so a rejected update leaves nothing behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..errors import ArithmeticOverflow, InsufficientLiquidity, InsufficientShares, InvariantViolation
from ..kernels.uint256 import MAX_UINT256, require_int
from .invariants import check_all

# Type aliases
AssetId = str
Owner = str
Amount = int


def _frozen_balances(balances: Mapping[Owner, Amount]) -> Mapping[Owner, Amount]:
    return MappingProxyType(dict(balances))


@dataclass(frozen=True)
class LedgerState:
    """
    Snapshot of a pool ledger.

    Attributes:
        asset_a: First asset identifier (canonical order, fixed for the pool's lifetime)
        asset_b: Second asset identifier
        reserve_a: Reserve of asset_a in smallest units
        reserve_b: Reserve of asset_b in smallest units
        total_shares: Sum of all outstanding shares
        balances: owner -> shares; zero balances are omitted
    """
    asset_a: AssetId
    asset_b: AssetId
    reserve_a: Amount = 0
    reserve_b: Amount = 0
    total_shares: Amount = 0
    balances: Mapping[Owner, Amount] = field(default_factory=lambda: MappingProxyType({}))

    def get_reserve(self, asset: AssetId) -> Amount:
        if asset == self.asset_a:
            return self.reserve_a
        if asset == self.asset_b:
            return self.reserve_b
        raise ValueError(f"Asset {asset} not in pool ({self.asset_a}, {self.asset_b})")

    def get_constant_product(self) -> int:
        return self.reserve_a * self.reserve_b

    def __repr__(self) -> str:
        return (
            f"LedgerState(assets=({self.asset_a}, {self.asset_b}), "
            f"reserves=({self.reserve_a}, {self.reserve_b}), "
            f"total_shares={self.total_shares}, holders={len(self.balances)})"
        )


class ReserveLedger:
    """
    Single mutation point for reserves and shares.

    Not thread-safe on its own: the owning ``Pool`` serializes access.
    """

    def __init__(self, asset_a: AssetId, asset_b: AssetId, *, max_value: int = MAX_UINT256) -> None:
        if not isinstance(asset_a, str) or not isinstance(asset_b, str):
            raise TypeError("asset identifiers must be strings")
        if not asset_a or not asset_b:
            raise ValueError("asset identifiers must be non-empty")
        if asset_a == asset_b:
            raise ValueError(f"pool assets must differ: {asset_a}")
        self._max_value = max_value
        self._state = LedgerState(asset_a=asset_a, asset_b=asset_b)

    @classmethod
    def from_state(cls, state: LedgerState, *, max_value: int = MAX_UINT256) -> "ReserveLedger":
        """Rebuild a ledger from a snapshot, refusing any state that breaks an invariant."""
        ledger = cls(state.asset_a, state.asset_b, max_value=max_value)
        restored = LedgerState(
            asset_a=state.asset_a,
            asset_b=state.asset_b,
            reserve_a=state.reserve_a,
            reserve_b=state.reserve_b,
            total_shares=state.total_shares,
            balances=_frozen_balances(state.balances),
        )
        ledger._check(restored)
        ledger._state = restored
        return ledger

    @property
    def state(self) -> LedgerState:
        return self._state

    @property
    def assets(self) -> Tuple[AssetId, AssetId]:
        return self._state.asset_a, self._state.asset_b

    def get_reserves(self) -> Tuple[Amount, Amount]:
        return self._state.reserve_a, self._state.reserve_b

    def get_total_shares(self) -> Amount:
        return self._state.total_shares

    def get_share(self, owner: Owner) -> Amount:
        """Get share balance for owner. Returns 0 if not found."""
        return self._state.balances.get(owner, 0)

    def get_all_shares(self) -> Dict[Owner, Amount]:
        return dict(self._state.balances)

    def apply(
        self,
        delta_a: int,
        delta_b: int,
        share_deltas: Optional[Mapping[Owner, int]] = None,
    ) -> LedgerState:
        """
        Commit reserve and share deltas together, or not at all.

        Args:
            delta_a: Signed change to reserve_a
            delta_b: Signed change to reserve_b
            share_deltas: owner -> signed change to that owner's shares

        Returns:
            The committed LedgerState

        Raises:
            InsufficientLiquidity: If a reserve would go negative
            InsufficientShares: If a share balance would go negative
            ArithmeticOverflow: If any value would leave the uint256 domain
            InvariantViolation: If the candidate state breaks a ledger invariant
        """
        require_int("delta_a", delta_a)
        require_int("delta_b", delta_b)
        share_deltas = share_deltas or {}

        cur = self._state
        new_reserve_a = cur.reserve_a + delta_a
        new_reserve_b = cur.reserve_b + delta_b
        if new_reserve_a < 0 or new_reserve_b < 0:
            raise InsufficientLiquidity(
                f"reserve would go negative: ({new_reserve_a}, {new_reserve_b})"
            )

        balances = dict(cur.balances)
        total_delta = 0
        for owner, delta in share_deltas.items():
            require_int(f"share_deltas[{owner!r}]", delta)
            current = balances.get(owner, 0)
            new_balance = current + delta
            if new_balance < 0:
                raise InsufficientShares(
                    f"Insufficient shares for {owner}: {current} + {delta} = {new_balance} < 0"
                )
            if new_balance == 0:
                # Remove zero balances to keep the table sparse
                balances.pop(owner, None)
            else:
                balances[owner] = new_balance
            total_delta += delta

        candidate = LedgerState(
            asset_a=cur.asset_a,
            asset_b=cur.asset_b,
            reserve_a=new_reserve_a,
            reserve_b=new_reserve_b,
            total_shares=cur.total_shares + total_delta,
            balances=_frozen_balances(balances),
        )
        self._check(candidate)
        self._state = candidate
        return candidate

    def _check(self, state: LedgerState) -> None:
        values = [state.reserve_a, state.reserve_b, state.total_shares, *state.balances.values()]
        if any(v > self._max_value for v in values):
            raise ArithmeticOverflow("ledger value exceeds the configured domain")
        violations = check_all(state)
        if violations:
            raise InvariantViolation(violations)

    def verify(self) -> list[str]:
        """Return violated invariant IDs for the current state (empty = all pass)."""
        return check_all(self._state)

    def __repr__(self) -> str:
        return f"ReserveLedger({self._state!r})"
