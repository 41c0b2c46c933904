#!/usr/bin/env python3
"""
Offline pool demo: seed a pool, swap both ways, withdraw everything.

Usage:
    python tools/pool_demo.py [--config pool.yaml] [--seed 1000] [--swap 100] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from simpleswap import Pool, SimpleSwapError, format_units, load_config, parse_units

TOKEN_A = "0x" + "11" * 20
TOKEN_B = "0x" + "22" * 20
ALICE = "0x" + "aa" * 20


def _now() -> int:
    return int(time.time())


def _print_pool(pool: Pool, label: str) -> None:
    decimals = pool.config.decimals
    reserve_a, reserve_b = pool.get_reserves()
    print(
        f"[pool-demo] {label}: reserves=({format_units(reserve_a, decimals)}, "
        f"{format_units(reserve_b, decimals)}) total_shares={pool.get_total_shares()}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run an offline SimpleSwap pool scenario")
    ap.add_argument("--config", default=None, help="Optional YAML PoolConfig file")
    ap.add_argument("--seed", default="1000", help="Initial deposit of each asset (decimal units)")
    ap.add_argument("--swap", default="100", help="Swap input amount (decimal units)")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config)
    pool = Pool(TOKEN_A, TOKEN_B, config=config)
    decimals = config.decimals
    deadline = _now() + 600

    try:
        seed = parse_units(args.seed, decimals)
        swap_in = parse_units(args.swap, decimals)

        added = pool.add_liquidity(TOKEN_A, TOKEN_B, seed, seed, 0, 0, ALICE, deadline)
        print(f"[pool-demo] seeded: shares_minted={added.shares_minted}")
        _print_pool(pool, "after seed")
        print(f"[pool-demo] price A/B = {format_units(pool.get_price(TOKEN_A, TOKEN_B), decimals)}")

        out = pool.swap_exact_in(swap_in, 0, [TOKEN_A, TOKEN_B], ALICE, deadline)
        print(f"[pool-demo] swap A->B: in={format_units(out.amount_in, decimals)} out={format_units(out.amount_out, decimals)}")
        _print_pool(pool, "after swap A->B")

        back = pool.swap_exact_in(out.amount_out, 0, [TOKEN_B, TOKEN_A], ALICE, deadline)
        print(f"[pool-demo] swap B->A: in={format_units(back.amount_in, decimals)} out={format_units(back.amount_out, decimals)}")
        _print_pool(pool, "after swap B->A")

        shares = pool.get_share(ALICE)
        removed = pool.remove_liquidity(TOKEN_A, TOKEN_B, shares, 0, 0, ALICE, deadline)
        print(
            f"[pool-demo] withdrew: a={format_units(removed.amount_a_out, decimals)} "
            f"b={format_units(removed.amount_b_out, decimals)}"
        )
        _print_pool(pool, "after withdraw")
    except (SimpleSwapError, ValueError) as exc:
        print(f"[pool-demo] FAIL: {exc}")
        return 1

    print("[pool-demo] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
