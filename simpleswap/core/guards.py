"""Guard functions for the pool façade.

Stateless checks run before any ledger access, in a fixed order: deadline,
then pair identity, then the operation's amount/slippage checks. Each guard
raises on failure and returns normally otherwise; none of them touches state.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ..errors import Expired, InvalidPair, SlippageExceeded


def check_deadline(now: int, deadline: int) -> None:
    """Reject when the current time is past *deadline* (equal is still valid)."""
    if now > deadline:
        raise Expired(f"deadline {deadline} passed (now={now})")


def check_pair(pool_pair: Tuple[str, str], token_x: str, token_y: str) -> bool:
    """
    Check that (token_x, token_y) is the pool pair in either order.

    Returns:
        True if the caller supplied the pair reversed relative to the pool's
        canonical order, False if in canonical order.

    Raises:
        InvalidPair: If the identifiers do not name the pool's two assets
    """
    asset_a, asset_b = pool_pair
    if token_x == asset_a and token_y == asset_b:
        return False
    if token_x == asset_b and token_y == asset_a:
        return True
    raise InvalidPair(f"({token_x}, {token_y}) is not the pool pair ({asset_a}, {asset_b})")


def check_path(pool_pair: Tuple[str, str], path: Sequence[str]) -> Tuple[str, str]:
    """Validate a two-hop swap path and return it as (asset_in, asset_out)."""
    if isinstance(path, (str, bytes)) or len(path) != 2:
        raise InvalidPair(f"path must name exactly two assets: {path!r}")
    asset_in, asset_out = path[0], path[1]
    check_pair(pool_pair, asset_in, asset_out)
    return asset_in, asset_out


def check_minimum(field: str, actual: int, minimum: int) -> None:
    if actual < minimum:
        raise SlippageExceeded(field, actual, minimum)
