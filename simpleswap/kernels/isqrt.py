"""
Integer square root kernel.

Babylonian (Newton) iteration over plain ints. The iterate decreases
monotonically from above until it stops moving, at which point it is
``floor(sqrt(n))``. Only exact integer comparisons are used: a float
``sqrt`` cannot represent 256-bit products and would mis-round the
first-deposit share count.
"""

from __future__ import annotations

from .uint256 import MAX_UINT256, require_uint


def integer_sqrt(n: int) -> int:
    """
    Return ``floor(sqrt(n))`` for ``0 <= n <= 2**256 - 1``.

    Raises:
        TypeError: If n is not an int
        ValueError: If n is negative
        ArithmeticOverflow: If n exceeds the uint256 domain
    """
    require_uint("n", n, max_value=MAX_UINT256)

    if n > 3:
        z = n
        x = n // 2 + 1
        while x < z:
            z = x
            x = (n // x + x) // 2
        return z
    if n != 0:
        return 1
    return 0
