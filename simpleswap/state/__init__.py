"""
Ledger state for a SimpleSwap pool
"""

from .invariants import check_all
from .ledger import LedgerState, ReserveLedger
from .snapshot import LedgerSnapshot, ledger_digest, ledger_from_dict, ledger_to_dict, restore_ledger, snapshot_ledger

__all__ = [
    "check_all",
    "LedgerState",
    "ReserveLedger",
    "LedgerSnapshot",
    "ledger_digest",
    "ledger_from_dict",
    "ledger_to_dict",
    "restore_ledger",
    "snapshot_ledger",
]
