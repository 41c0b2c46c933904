"""
Ledger snapshot encoding.

Goals:
- Deterministic JSON serialization for hashing / handing the ledger to a storage substrate.
- Round-trippable into `LedgerState`, with every invariant re-checked on restore.
- Explicit versioning.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .ledger import LedgerState, ReserveLedger


LEDGER_SNAPSHOT_VERSION = 1


def _reject_floats(value: Any) -> None:
    if isinstance(value, float):
        raise TypeError("floats are not allowed in canonical encoding")
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError("dict keys must be str for canonical encoding")
            _reject_floats(v)
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            _reject_floats(item)


def canonical_json_bytes(value: Any) -> bytes:
    """
    Canonical JSON encoding for hashing.

    Rules:
    - UTF-8
    - sort_keys=True
    - separators=(',', ':') (no whitespace)
    - allow_nan=False
    - floats rejected (to avoid representation ambiguity)
    """
    _reject_floats(value)
    text = json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
    return text.encode("utf-8")


def _require_str(value: Any, *, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise TypeError(f"{name} must be a non-empty string")
    return value


def _require_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return int(value)


@dataclass(frozen=True)
class LedgerSnapshot:
    version: int
    data: Dict[str, Any]

    def canonical_bytes(self) -> bytes:
        return canonical_json_bytes({"version": self.version, "ledger": self.data})

    def digest_hex(self) -> str:
        return "0x" + hashlib.sha256(self.canonical_bytes()).hexdigest()


def ledger_to_dict(state: LedgerState) -> Dict[str, Any]:
    shares = [{"owner": owner, "shares": int(amount)} for owner, amount in state.balances.items()]
    shares.sort(key=lambda e: e["owner"])
    return {
        "asset_a": state.asset_a,
        "asset_b": state.asset_b,
        "reserve_a": int(state.reserve_a),
        "reserve_b": int(state.reserve_b),
        "total_shares": int(state.total_shares),
        "shares": shares,
    }


def ledger_from_dict(d: Mapping[str, Any]) -> LedgerState:
    """Deserialize a dict to a LedgerState. Raises KeyError on missing fields."""
    balances: Dict[str, int] = {}
    for i, entry in enumerate(d["shares"]):
        owner = _require_str(entry["owner"], name=f"shares[{i}].owner")
        if owner in balances:
            raise ValueError(f"duplicate owner in shares: {owner}")
        balances[owner] = _require_int(entry["shares"], name=f"shares[{i}].shares")
    return LedgerState(
        asset_a=_require_str(d["asset_a"], name="asset_a"),
        asset_b=_require_str(d["asset_b"], name="asset_b"),
        reserve_a=_require_int(d["reserve_a"], name="reserve_a"),
        reserve_b=_require_int(d["reserve_b"], name="reserve_b"),
        total_shares=_require_int(d["total_shares"], name="total_shares"),
        balances=balances,
    )


def snapshot_ledger(ledger: ReserveLedger, *, version: int = LEDGER_SNAPSHOT_VERSION) -> LedgerSnapshot:
    if not isinstance(version, int) or isinstance(version, bool) or version <= 0:
        raise ValueError("version must be a positive int")
    return LedgerSnapshot(version=version, data=ledger_to_dict(ledger.state))


def restore_ledger(snapshot: LedgerSnapshot, **ledger_kwargs: Any) -> ReserveLedger:
    if snapshot.version != LEDGER_SNAPSHOT_VERSION:
        raise ValueError(f"unsupported snapshot version: {snapshot.version}")
    return ReserveLedger.from_state(ledger_from_dict(snapshot.data), **ledger_kwargs)


def ledger_digest(state: LedgerState) -> str:
    """sha256 over the canonical snapshot of *state*."""
    return LedgerSnapshot(version=LEDGER_SNAPSHOT_VERSION, data=ledger_to_dict(state)).digest_hex()
