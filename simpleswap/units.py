"""
Decimal string <-> scaled integer conversion.

Integer-only: amounts never pass through float. These are presentation
helpers for hosts and tools; the engine itself only sees scaled ints.
"""

from __future__ import annotations

import re

_DECIMAL_RE = re.compile(r"^(?P<sign>-?)(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?$")


def parse_units(text: str, decimals: int = 18) -> int:
    """
    Parse a decimal string into smallest units: ``parse_units("1.5", 18) == 15 * 10**17``.

    Raises:
        ValueError: If the text is not a plain decimal or has more than *decimals* fractional digits
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0:
        raise ValueError("decimals must be a non-negative int")
    m = _DECIMAL_RE.match(text.strip())
    if m is None or not (m.group("whole") or m.group("frac")):
        raise ValueError(f"invalid decimal amount: {text!r}")
    whole = m.group("whole") or "0"
    frac = (m.group("frac") or "").rstrip("0")
    if len(frac) > decimals:
        raise ValueError(f"too many decimal places for {decimals} decimals: {text!r}")
    value = int(whole) * 10 ** decimals + int(frac.ljust(decimals, "0") or "0")
    return -value if m.group("sign") else value


def format_units(value: int, decimals: int = 18) -> str:
    """Render smallest units as a decimal string with trailing zeros trimmed: ``"90.90909"``."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("value must be an int")
    if not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0:
        raise ValueError("decimals must be a non-negative int")
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), 10 ** decimals)
    if decimals == 0:
        return f"{sign}{whole}"
    frac_s = str(frac).rjust(decimals, "0").rstrip("0")
    if not frac_s:
        return f"{sign}{whole}.0"
    return f"{sign}{whole}.{frac_s}"
