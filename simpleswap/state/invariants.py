"""Invariant checkers for the reserve ledger.

Each function returns True when the invariant holds, and `check_all()` returns
the list of violated invariant IDs (empty = all pass).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..kernels.uint256 import MAX_UINT256

if TYPE_CHECKING:
    from .ledger import LedgerState


def inv_distinct_assets(s: LedgerState) -> bool:
    return s.asset_a != s.asset_b


def inv_reserves_nonneg(s: LedgerState) -> bool:
    return s.reserve_a >= 0 and s.reserve_b >= 0


def inv_shares_nonneg(s: LedgerState) -> bool:
    return s.total_shares >= 0 and all(v >= 0 for v in s.balances.values())


def inv_empty_iff_unseeded(s: LedgerState) -> bool:
    return (s.reserve_a == 0) == (s.reserve_b == 0) == (s.total_shares == 0)


def inv_share_conservation(s: LedgerState) -> bool:
    return s.total_shares == sum(s.balances.values())


def inv_uint256_domain(s: LedgerState) -> bool:
    if s.reserve_a > MAX_UINT256 or s.reserve_b > MAX_UINT256:
        return False
    if s.total_shares > MAX_UINT256:
        return False
    return all(v <= MAX_UINT256 for v in s.balances.values())


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[LedgerState], bool]] = {
    "inv_distinct_assets": inv_distinct_assets,
    "inv_reserves_nonneg": inv_reserves_nonneg,
    "inv_shares_nonneg": inv_shares_nonneg,
    "inv_empty_iff_unseeded": inv_empty_iff_unseeded,
    "inv_share_conservation": inv_share_conservation,
    "inv_uint256_domain": inv_uint256_domain,
}


def check_all(state: LedgerState) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(state)
    ]
