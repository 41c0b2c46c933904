"""Exception types for the SimpleSwap pool engine.

Every rejection is raised synchronously and leaves the ledger untouched.
Each class carries a short stable ``code`` so hosts can map rejections onto
their own surfaces (HTTP status, UI toast, revert reason) without string
matching on messages.
"""

from __future__ import annotations


class SimpleSwapError(Exception):
    """Base class for all pool rejections."""

    code = "SS"


class InvalidPair(SimpleSwapError):
    """Supplied asset identifiers do not match the pool's pair."""

    code = "SS: ITP"


class Expired(SimpleSwapError):
    """Current time is past the caller-supplied deadline."""

    code = "SS: EXP"


class InsufficientInitialLiquidity(SimpleSwapError):
    """First deposit mints zero or below-floor shares."""

    code = "SS: IIL"


class InsufficientShares(SimpleSwapError):
    """Burn request is zero or exceeds the caller's share balance."""

    code = "SS: IS"


class InsufficientLiquidity(SimpleSwapError):
    """Operation needs a seeded pool but a reserve is zero."""

    code = "SS: IL"


class SlippageExceeded(SimpleSwapError):
    """A computed amount fell below the caller-supplied minimum."""

    code = "SS: SLP"

    def __init__(self, field: str, actual: int, minimum: int) -> None:
        self.field = field
        self.actual = actual
        self.minimum = minimum
        super().__init__(f"{field} ({actual}) < minimum ({minimum})")


class ArithmeticOverflow(SimpleSwapError):
    """An input or intermediate value left the uint256 domain."""

    code = "SS: OVF"


class InvalidAmount(SimpleSwapError, ValueError):
    """Non-positive input amount, or a deposit too small to mint shares."""

    code = "SS: IA"


class InvariantViolation(SimpleSwapError):
    """Raised when a candidate ledger state violates one or more invariants."""

    code = "SS: INV"

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
