# [TESTER] v1

from __future__ import annotations

import pytest

from simpleswap.core.guards import check_deadline, check_minimum, check_pair, check_path
from simpleswap.errors import Expired, InvalidPair, SlippageExceeded

PAIR = ("tka", "tkb")


def test_deadline_is_inclusive() -> None:
    check_deadline(now=100, deadline=100)
    check_deadline(now=99, deadline=100)
    with pytest.raises(Expired):
        check_deadline(now=101, deadline=100)


def test_pair_in_either_order() -> None:
    assert check_pair(PAIR, "tka", "tkb") is False
    assert check_pair(PAIR, "tkb", "tka") is True


@pytest.mark.parametrize(
    "x, y",
    [("tka", "tka"), ("tkb", "tkb"), ("tka", "tkc"), ("tkc", "tkb"), ("", "")],
)
def test_pair_mismatch(x: str, y: str) -> None:
    with pytest.raises(InvalidPair):
        check_pair(PAIR, x, y)


def test_path_must_have_two_pool_assets() -> None:
    assert check_path(PAIR, ["tkb", "tka"]) == ("tkb", "tka")
    with pytest.raises(InvalidPair):
        check_path(PAIR, ["tka"])
    with pytest.raises(InvalidPair):
        check_path(PAIR, ["tka", "tkb", "tka"])
    with pytest.raises(InvalidPair):
        check_path(PAIR, "ab")


def test_minimum_reports_the_failing_field() -> None:
    check_minimum("amount_out", 10, 10)
    with pytest.raises(SlippageExceeded) as exc:
        check_minimum("amount_out", 9, 10)
    assert (exc.value.field, exc.value.actual, exc.value.minimum) == ("amount_out", 9, 10)
    assert exc.value.code == "SS: SLP"
