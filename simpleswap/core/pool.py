"""
Pool façade: the public surface of the engine.

Every mutating call runs, under the pool's lock:

1. Guards (deadline, then pair identity).
2. A pure compute step against the current ledger snapshot
   (amount and slippage checks happen here).
3. One atomic ``ReserveLedger.apply()``.

A rejection at any step raises before the ledger is touched. Successful calls
return a frozen result record and publish a ``PoolEvent`` to subscribers.
Publishing happens before the lock is released, so subscribers see events in
commit order.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, List, Optional, Sequence, Tuple

from ..config import PoolConfig
from ..errors import SimpleSwapError
from ..kernels.cpmm_swap import get_amount_out, spot_price
from ..kernels.uint256 import require_int
from ..state.ledger import Amount, AssetId, LedgerState, Owner, ReserveLedger
from ..state.snapshot import LedgerSnapshot, restore_ledger, snapshot_ledger
from .guards import check_deadline, check_pair, check_path
from .liquidity import compute_add_liquidity, compute_remove_liquidity
from .swap import compute_swap_exact_in
from .types import AddLiquidityResult, Operation, PoolEvent, RemoveLiquidityResult, SwapResult

log = logging.getLogger(__name__)

Clock = Callable[[], int]
Subscriber = Callable[[PoolEvent], None]


def system_clock() -> int:
    return int(time.time())


def _require_account(name: str, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise TypeError(f"{name} must be a non-empty string")


class Pool:
    """
    A two-asset constant-product pool with proportional shares.

    Args:
        asset_a: First asset identifier (canonical order)
        asset_b: Second asset identifier
        config: Engine configuration (defaults to ``PoolConfig()``)
        clock: Returns the current time in the same unit as call deadlines
            (unix seconds by default)
    """

    def __init__(
        self,
        asset_a: AssetId,
        asset_b: AssetId,
        *,
        config: Optional[PoolConfig] = None,
        clock: Optional[Clock] = None,
        ledger: Optional[ReserveLedger] = None,
    ) -> None:
        self._config = config or PoolConfig()
        self._clock = clock or system_clock
        if ledger is None:
            ledger = ReserveLedger(asset_a, asset_b, max_value=self._config.max_amount)
        elif ledger.assets != (asset_a, asset_b):
            raise ValueError(f"ledger pair {ledger.assets} does not match ({asset_a}, {asset_b})")
        self._ledger = ledger
        self._lock = threading.RLock()
        self._subscribers: List[Subscriber] = []

    @classmethod
    def from_snapshot(
        cls,
        snapshot: LedgerSnapshot,
        *,
        config: Optional[PoolConfig] = None,
        clock: Optional[Clock] = None,
    ) -> "Pool":
        config = config or PoolConfig()
        ledger = restore_ledger(snapshot, max_value=config.max_amount)
        asset_a, asset_b = ledger.assets
        return cls(asset_a, asset_b, config=config, clock=clock, ledger=ledger)

    # -- Queries -------------------------------------------------------------

    @property
    def asset_a(self) -> AssetId:
        return self._ledger.assets[0]

    @property
    def asset_b(self) -> AssetId:
        return self._ledger.assets[1]

    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def state(self) -> LedgerState:
        with self._lock:
            return self._ledger.state

    def get_reserves(self) -> Tuple[Amount, Amount]:
        with self._lock:
            return self._ledger.get_reserves()

    def get_total_shares(self) -> Amount:
        with self._lock:
            return self._ledger.get_total_shares()

    def get_share(self, owner: Owner) -> Amount:
        with self._lock:
            return self._ledger.get_share(owner)

    def get_price(self, base_asset: AssetId, quote_asset: AssetId) -> int:
        """Price of one unit of *base_asset* in *quote_asset*, scaled by ``10**decimals``."""
        with self._lock:
            reversed_pair = check_pair(self._ledger.assets, base_asset, quote_asset)
            reserve_a, reserve_b = self._ledger.get_reserves()
        if reversed_pair:
            reserve_base, reserve_quote = reserve_b, reserve_a
        else:
            reserve_base, reserve_quote = reserve_a, reserve_b
        return spot_price(
            reserve_base=reserve_base,
            reserve_quote=reserve_quote,
            scale=self._config.price_scale,
            max_value=self._config.max_amount,
        )

    def get_amount_out(self, amount_in: Amount, reserve_in: Amount, reserve_out: Amount) -> Amount:
        return get_amount_out(
            amount_in=amount_in,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            max_value=self._config.max_amount,
        )

    def snapshot(self) -> LedgerSnapshot:
        with self._lock:
            return snapshot_ledger(self._ledger)

    # -- Events --------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register *callback* for every PoolEvent. Returns an unsubscribe function.

        Callbacks run on the mutating thread with the pool lock held. They may
        query the pool, but must not wait on another thread that uses it.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, event: PoolEvent) -> None:
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                # The ledger update is already committed; a failing observer must not undo it.
                log.exception("pool event subscriber failed for %s", event.operation.value)

    def _event(
        self,
        operation: Operation,
        caller: Owner,
        recipient: Owner,
        deltas: Tuple[Tuple[AssetId, int], ...],
        shares: int,
        state: LedgerState,
    ) -> PoolEvent:
        price = 0
        if state.reserve_a > 0:
            price = (state.reserve_b * self._config.price_scale) // state.reserve_a
        return PoolEvent(
            operation=operation,
            caller=caller,
            recipient=recipient,
            amounts=deltas,
            shares=shares,
            price=price,
            reserves=(state.reserve_a, state.reserve_b),
            total_shares=state.total_shares,
        )

    # -- Mutations -----------------------------------------------------------

    def add_liquidity(
        self,
        token_a: AssetId,
        token_b: AssetId,
        amount_a_desired: Amount,
        amount_b_desired: Amount,
        amount_a_min: Amount,
        amount_b_min: Amount,
        recipient: Owner,
        deadline: int,
        *,
        caller: Optional[Owner] = None,
    ) -> AddLiquidityResult:
        """
        Deposit both assets and mint shares to *recipient*.

        Amounts and minimums follow the order of (token_a, token_b) as passed;
        the result reports amounts in that same order.
        """
        _require_account("recipient", recipient)
        require_int("deadline", deadline)
        caller = caller or recipient

        with self._lock:
            try:
                check_deadline(self._clock(), deadline)
                reversed_pair = check_pair(self._ledger.assets, token_a, token_b)
                if reversed_pair:
                    amount_a_desired, amount_b_desired = amount_b_desired, amount_a_desired
                    amount_a_min, amount_b_min = amount_b_min, amount_a_min

                res = compute_add_liquidity(
                    self._ledger.state,
                    amount_a_desired,
                    amount_b_desired,
                    amount_a_min,
                    amount_b_min,
                    self._config,
                    reversed_pair=reversed_pair,
                )
                state = self._ledger.apply(
                    res.amount_a_used,
                    res.amount_b_used,
                    {recipient: res.shares_minted},
                )
            except SimpleSwapError as exc:
                log.debug("add_liquidity rejected [%s]: %s", exc.code, exc)
                raise

            event = self._event(
                Operation.ADD_LIQUIDITY,
                caller,
                recipient,
                ((state.asset_a, res.amount_a_used), (state.asset_b, res.amount_b_used)),
                res.shares_minted,
                state,
            )
            log.info(
                "add_liquidity caller=%s recipient=%s amounts=(%d, %d) shares=%d reserves=(%d, %d)",
                caller, recipient, res.amount_a_used, res.amount_b_used, res.shares_minted,
                state.reserve_a, state.reserve_b,
            )
            self._publish(event)

        used_a, used_b = res.amount_a_used, res.amount_b_used
        if reversed_pair:
            used_a, used_b = used_b, used_a
        return AddLiquidityResult(
            amount_a_used=used_a,
            amount_b_used=used_b,
            shares_minted=res.shares_minted,
            event=event,
        )

    def remove_liquidity(
        self,
        token_a: AssetId,
        token_b: AssetId,
        shares_in: Amount,
        amount_a_min: Amount,
        amount_b_min: Amount,
        recipient: Owner,
        deadline: int,
        *,
        caller: Optional[Owner] = None,
    ) -> RemoveLiquidityResult:
        """
        Burn *caller*'s shares and pay the proportional reserves to *recipient*.

        The caller defaults to the recipient. Minimums and outputs follow the
        order of (token_a, token_b) as passed.
        """
        _require_account("recipient", recipient)
        require_int("deadline", deadline)
        caller = caller or recipient

        with self._lock:
            try:
                check_deadline(self._clock(), deadline)
                reversed_pair = check_pair(self._ledger.assets, token_a, token_b)
                if reversed_pair:
                    amount_a_min, amount_b_min = amount_b_min, amount_a_min

                res = compute_remove_liquidity(
                    self._ledger.state,
                    caller,
                    shares_in,
                    amount_a_min,
                    amount_b_min,
                    self._config,
                    reversed_pair=reversed_pair,
                )
                state = self._ledger.apply(
                    -res.amount_a_out,
                    -res.amount_b_out,
                    {caller: -shares_in},
                )
            except SimpleSwapError as exc:
                log.debug("remove_liquidity rejected [%s]: %s", exc.code, exc)
                raise

            event = self._event(
                Operation.REMOVE_LIQUIDITY,
                caller,
                recipient,
                ((state.asset_a, -res.amount_a_out), (state.asset_b, -res.amount_b_out)),
                shares_in,
                state,
            )
            log.info(
                "remove_liquidity caller=%s recipient=%s amounts=(%d, %d) shares=%d reserves=(%d, %d)",
                caller, recipient, res.amount_a_out, res.amount_b_out, shares_in,
                state.reserve_a, state.reserve_b,
            )
            self._publish(event)

        out_a, out_b = res.amount_a_out, res.amount_b_out
        if reversed_pair:
            out_a, out_b = out_b, out_a
        return RemoveLiquidityResult(
            amount_a_out=out_a,
            amount_b_out=out_b,
            shares_burned=shares_in,
            event=event,
        )

    def swap_exact_in(
        self,
        amount_in: Amount,
        amount_out_min: Amount,
        path: Sequence[AssetId],
        recipient: Owner,
        deadline: int,
        *,
        caller: Optional[Owner] = None,
    ) -> SwapResult:
        """
        Swap exactly *amount_in* of ``path[0]`` for as much ``path[1]`` as the curve gives.

        The caller's layer must already have made *amount_in* available to the
        pool's custody; the engine only accounts for the transfer.
        """
        _require_account("recipient", recipient)
        require_int("deadline", deadline)
        caller = caller or recipient

        with self._lock:
            try:
                check_deadline(self._clock(), deadline)
                asset_in, asset_out = check_path(self._ledger.assets, path)
                res = compute_swap_exact_in(
                    self._ledger.state,
                    asset_in,
                    amount_in,
                    amount_out_min,
                    self._config,
                )
                if asset_in == self._ledger.assets[0]:
                    state = self._ledger.apply(res.amount_in, -res.amount_out)
                else:
                    state = self._ledger.apply(-res.amount_out, res.amount_in)
            except SimpleSwapError as exc:
                log.debug("swap_exact_in rejected [%s]: %s", exc.code, exc)
                raise

            event = self._event(
                Operation.SWAP_EXACT_IN,
                caller,
                recipient,
                ((asset_in, res.amount_in), (asset_out, -res.amount_out)),
                0,
                state,
            )
            log.info(
                "swap_exact_in caller=%s recipient=%s %s->%s in=%d out=%d reserves=(%d, %d)",
                caller, recipient, asset_in, asset_out, res.amount_in, res.amount_out,
                state.reserve_a, state.reserve_b,
            )
            self._publish(event)

        return SwapResult(
            amount_in=res.amount_in,
            amount_out=res.amount_out,
            asset_in=asset_in,
            asset_out=asset_out,
            event=event,
        )

    def __repr__(self) -> str:
        return f"Pool({self._ledger.state!r})"
