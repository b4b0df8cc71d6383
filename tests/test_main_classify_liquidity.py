import logging

import pandas as pd
import pytest

import main_classify_liquidity


@pytest.fixture
def volume_csv(tmp_path):
    """download_ohlcv 형식의 일봉 CSV (2024-01-01 ~ 2024-01-30, 2024-01-25 거래량 급감)"""
    dates = pd.date_range('2024-01-01', periods=30, freq='D')
    volumes = [1000.0] * 30
    volumes[24] = 50.0
    df = pd.DataFrame({
        'datetime': dates,
        'open': 1.0,
        'high': 1.0,
        'low': 1.0,
        'close': 1.0,
        'volume': volumes,
    })
    path = tmp_path / 'BTCUSDT.P_daily.csv'
    df.to_csv(path, index=False)
    return path


def test_prints_traffic_light(volume_csv, monkeypatch, capsys):
    monkeypatch.setenv('LIQUIDITY_NOW', '2024-01-30T00:00:00Z')
    assert main_classify_liquidity.main([str(volume_csv)]) == 0
    assert capsys.readouterr().out.strip() == 'green'


def test_stale_dip_is_red(volume_csv, monkeypatch, capsys):
    monkeypatch.setenv('LIQUIDITY_NOW', '2024-03-10T00:00:00Z')
    assert main_classify_liquidity.main([str(volume_csv)]) == 0
    assert capsys.readouterr().out.strip() == 'red'


def test_missing_argument():
    assert main_classify_liquidity.main([]) == 1


def test_missing_file(tmp_path):
    assert main_classify_liquidity.main([str(tmp_path / 'nope.csv')]) == 1


def test_bad_config(volume_csv, monkeypatch):
    monkeypatch.setenv('LIQUIDITY_THRESHOLD_FRACTION', '3')
    assert main_classify_liquidity.main([str(volume_csv)]) == 1


def test_now_and_asset_flags(volume_csv, monkeypatch, capsys, caplog):
    monkeypatch.delenv('LIQUIDITY_NOW', raising=False)
    monkeypatch.delenv('ASSET_ID', raising=False)
    with caplog.at_level(logging.INFO):
        code = main_classify_liquidity.main(
            [str(volume_csv), '--now', '2024-01-30T00:00:00Z', '--asset', 'bitcoin']
        )
    assert code == 0
    assert capsys.readouterr().out.strip() == 'green'
    assert 'bitcoin: SAFE' in caplog.text


def test_now_flag_overrides_env(volume_csv, monkeypatch, capsys):
    monkeypatch.setenv('LIQUIDITY_NOW', '2024-03-10T00:00:00Z')
    assert main_classify_liquidity.main([str(volume_csv), '--now', '2024-02-10T00:00:00Z']) == 0
    assert capsys.readouterr().out.strip() == 'yellow'


def test_asset_env_fallback(volume_csv, monkeypatch, caplog):
    monkeypatch.setenv('LIQUIDITY_NOW', '2024-01-30T00:00:00Z')
    monkeypatch.setenv('ASSET_ID', 'ethereum')
    with caplog.at_level(logging.INFO):
        assert main_classify_liquidity.main([str(volume_csv)]) == 0
    assert 'ethereum: SAFE' in caplog.text
