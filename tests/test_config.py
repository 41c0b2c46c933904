# [TESTER] v1

from __future__ import annotations

import pytest

from simpleswap import MAX_UINT256, ArithmeticOverflow, Pool, PoolConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SIMPLESWAP_MINIMUM_LIQUIDITY", raising=False)
    monkeypatch.delenv("SIMPLESWAP_DECIMALS", raising=False)


def test_defaults() -> None:
    cfg = PoolConfig()
    assert cfg.minimum_liquidity == 1000
    assert cfg.decimals == 18
    assert cfg.max_amount == MAX_UINT256
    assert cfg.price_scale == 10**18
    assert load_config() == cfg


def test_env_overrides_are_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIMPLESWAP_DECIMALS", "6")
    monkeypatch.setenv("SIMPLESWAP_MINIMUM_LIQUIDITY", "-5")
    cfg = PoolConfig.from_env()
    assert cfg.decimals == 6
    assert cfg.minimum_liquidity == 0

    monkeypatch.setenv("SIMPLESWAP_DECIMALS", "999")
    assert PoolConfig.from_env().decimals == 77


def test_env_garbage_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIMPLESWAP_DECIMALS", "six")
    assert PoolConfig.from_env().decimals == 18


def test_yaml_overrides_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIMPLESWAP_DECIMALS", "6")
    path = tmp_path / "pool.yaml"
    path.write_text("minimum_liquidity: 10\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.minimum_liquidity == 10
    assert cfg.decimals == 6


def test_empty_yaml_keeps_base(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == PoolConfig()


def test_yaml_rejects_unknown_keys_and_non_mappings(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("fee_bps: 30\n", encoding="utf-8")
    with pytest.raises(ValueError, match="fee_bps"):
        load_config(path)

    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "kwargs, exc",
    [
        ({"decimals": 78}, ValueError),
        ({"decimals": -1}, ValueError),
        ({"minimum_liquidity": -1}, ValueError),
        ({"max_amount": 0}, ValueError),
        ({"max_amount": MAX_UINT256 + 1}, ValueError),
        ({"decimals": 18.0}, TypeError),
        ({"decimals": True}, TypeError),
    ],
)
def test_invalid_config(kwargs: dict, exc: type) -> None:
    with pytest.raises(exc):
        PoolConfig(**kwargs)


def test_custom_floor_changes_first_mint() -> None:
    pool = Pool("tka", "tkb", config=PoolConfig(minimum_liquidity=10), clock=lambda: 0)
    res = pool.add_liquidity("tka", "tkb", 100, 100, 0, 0, "alice", 0)
    assert res.shares_minted == 90


def test_max_amount_bounds_reserves() -> None:
    pool = Pool("tka", "tkb", config=PoolConfig(max_amount=10**8), clock=lambda: 0)
    pool.add_liquidity("tka", "tkb", 2000, 2000, 0, 0, "alice", 0)
    with pytest.raises(ArithmeticOverflow):
        pool.swap_exact_in(10**6, 0, ["tka", "tkb"], "bob", 0)
