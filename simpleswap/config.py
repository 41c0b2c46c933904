"""
Pool engine configuration.

Sources, in order of precedence for `load_config()`:
- an explicit YAML file (PyYAML `safe_load`), if given,
- `SIMPLESWAP_*` environment variables,
- the dataclass defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .kernels.lp_math import MINIMUM_LIQUIDITY
from .kernels.uint256 import MAX_UINT256

ENV_PREFIX = "SIMPLESWAP_"


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


@dataclass(frozen=True)
class PoolConfig:
    """Runtime config for a pool.

    Attributes:
        minimum_liquidity: Shares burned from the first deposit; the first
            deposit must produce strictly more than this.
        decimals: Implied fractional decimal digits of the scaled amounts.
        max_amount: Upper bound of every reserve, share and intermediate product.
    """

    minimum_liquidity: int = MINIMUM_LIQUIDITY
    decimals: int = 18
    max_amount: int = MAX_UINT256

    def __post_init__(self) -> None:
        for f in fields(self):
            v = getattr(self, f.name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{f.name} must be an int")
        if self.minimum_liquidity < 0:
            raise ValueError(f"minimum_liquidity must be non-negative: {self.minimum_liquidity}")
        if not (0 <= self.decimals <= 77):
            raise ValueError(f"decimals must be in [0, 77]: {self.decimals}")
        if not (0 < self.max_amount <= MAX_UINT256):
            raise ValueError("max_amount must be in (0, 2**256 - 1]")

    @property
    def price_scale(self) -> int:
        return 10 ** self.decimals

    @classmethod
    def from_env(cls) -> "PoolConfig":
        base = cls()
        return replace(
            base,
            minimum_liquidity=_env_int(
                ENV_PREFIX + "MINIMUM_LIQUIDITY", base.minimum_liquidity, lo=0, hi=10**18
            ),
            decimals=_env_int(ENV_PREFIX + "DECIMALS", base.decimals, lo=0, hi=77),
        )

    @classmethod
    def from_mapping(cls, obj: Mapping[str, Any], *, base: Optional["PoolConfig"] = None) -> "PoolConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(obj) - known)
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(unknown)}")
        return replace(base or cls(), **dict(obj))

    @classmethod
    def from_yaml(cls, path: Union[str, Path], *, base: Optional["PoolConfig"] = None) -> "PoolConfig":
        obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if obj is None:
            return base or cls()
        if not isinstance(obj, dict):
            raise ValueError(f"config file must hold a mapping: {path}")
        return cls.from_mapping(obj, base=base)


def load_config(path: Optional[Union[str, Path]] = None) -> PoolConfig:
    config = PoolConfig.from_env()
    if path is not None:
        config = PoolConfig.from_yaml(path, base=config)
    return config
