# [TESTER] v1

from __future__ import annotations

import json

import pytest

from simpleswap.errors import InvariantViolation
from simpleswap.state import (
    ReserveLedger,
    ledger_digest,
    ledger_from_dict,
    ledger_to_dict,
    restore_ledger,
    snapshot_ledger,
)
from simpleswap.state.snapshot import LedgerSnapshot, canonical_json_bytes

TOKEN_A = "0x" + "11" * 20
TOKEN_B = "0x" + "22" * 20


def test_snapshot_round_trip() -> None:
    ledger = ReserveLedger(TOKEN_A, TOKEN_B)
    ledger.apply(10**21, 2 * 10**21, {"bob": 7, "alice": 3})

    snap = snapshot_ledger(ledger)
    restored = restore_ledger(snap)
    assert restored.get_reserves() == ledger.get_reserves()
    assert restored.get_all_shares() == {"alice": 3, "bob": 7}
    assert ledger_from_dict(ledger_to_dict(ledger.state)).balances == {"alice": 3, "bob": 7}


def test_digest_is_insertion_order_independent() -> None:
    first = ReserveLedger(TOKEN_A, TOKEN_B)
    first.apply(100, 100, {"alice": 1, "bob": 2})

    second = ReserveLedger(TOKEN_A, TOKEN_B)
    second.apply(100, 100, {"bob": 2, "alice": 1})

    assert ledger_digest(first.state) == ledger_digest(second.state)
    assert ledger_digest(first.state).startswith("0x")


def test_canonical_bytes_are_compact_and_sorted() -> None:
    ledger = ReserveLedger(TOKEN_A, TOKEN_B)
    ledger.apply(5, 6, {"alice": 1})
    raw = snapshot_ledger(ledger).canonical_bytes()
    assert b" " not in raw
    obj = json.loads(raw)
    assert list(obj) == ["ledger", "version"]
    assert obj["ledger"]["shares"] == [{"owner": "alice", "shares": 1}]


def test_canonical_json_rejects_floats() -> None:
    with pytest.raises(TypeError):
        canonical_json_bytes({"reserve_a": 1.5})


def test_restore_rejects_tampered_snapshot() -> None:
    ledger = ReserveLedger(TOKEN_A, TOKEN_B)
    ledger.apply(5, 6, {"alice": 4})
    data = ledger_to_dict(ledger.state)
    data["total_shares"] = 5
    with pytest.raises(InvariantViolation):
        restore_ledger(LedgerSnapshot(version=1, data=data))


def test_restore_rejects_unknown_version_and_bad_types() -> None:
    ledger = ReserveLedger(TOKEN_A, TOKEN_B)
    data = ledger_to_dict(ledger.state)
    with pytest.raises(ValueError):
        restore_ledger(LedgerSnapshot(version=2, data=data))
    data["reserve_a"] = "5"
    with pytest.raises(TypeError):
        ledger_from_dict(data)
