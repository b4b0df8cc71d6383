import pandas as pd
import pytest

from utils.liquidity_risk import VolumeSample


BASE = pd.Timestamp('2024-01-01', tz='UTC')


def day(n: float) -> pd.Timestamp:
    """Instant n days after BASE"""
    return BASE + pd.Timedelta(days=n)


@pytest.fixture
def make_series():
    """Daily series starting at day(start) with the given volumes"""
    def _make(volumes, start=1):
        return [VolumeSample(timestamp=day(start + i), volume=float(v)) for i, v in enumerate(volumes)]
    return _make


@pytest.fixture
def dip_series(make_series):
    """30 daily volumes of 1000 with a single dip to 50 on the given day (1-based)"""
    def _make(dip_day):
        volumes = [1000.0] * 30
        volumes[dip_day - 1] = 50.0
        return make_series(volumes)
    return _make
