import numpy as np
import pandas as pd
import pytest

from conftest import day
from utils.liquidity_risk import (
    ThresholdCalculator,
    VolumeSample,
    InvalidThresholdFractionError,
    derive_threshold,
    find_last_quiet_timestamp,
)


class TestThresholdCalculator:

    def test_default_fraction_constant(self):
        assert ThresholdCalculator.DEFAULT_FRACTION == 0.1
        assert ThresholdCalculator().fraction == ThresholdCalculator.DEFAULT_FRACTION

    def test_ten_percent_of_max(self, make_series):
        series = make_series([200.0, 1000.0, 600.0])
        assert derive_threshold(series) == pytest.approx(100.0)

    def test_custom_fraction(self, make_series):
        series = make_series([200.0, 1000.0, 600.0])
        assert derive_threshold(series, fraction=0.25) == pytest.approx(250.0)

    def test_empty_series_is_undefined(self):
        assert derive_threshold([]) is None

    def test_all_zero_is_zero(self, make_series):
        assert derive_threshold(make_series([0.0, 0.0, 0.0])) == 0.0

    def test_non_finite_is_undefined(self):
        calculator = ThresholdCalculator()
        assert calculator.calculate_threshold(np.array([1.0, np.inf])) is None
        assert calculator.calculate_threshold(np.array([np.nan, 3.0])) is None

    def test_validate_inputs(self):
        calculator = ThresholdCalculator()
        assert calculator.validate_inputs(np.array([1.0, 2.0]))
        assert not calculator.validate_inputs(np.array([1.0, np.nan]))

    @pytest.mark.parametrize('fraction', [-0.1, 1.01, float('nan')])
    def test_fraction_out_of_range(self, fraction):
        with pytest.raises(InvalidThresholdFractionError):
            ThresholdCalculator(fraction)

    @pytest.mark.parametrize('fraction', [0.0, 1.0])
    def test_fraction_bounds_accepted(self, fraction):
        assert ThresholdCalculator(fraction).fraction == fraction


class TestRecencyScanner:

    def test_returns_latest_quiet_timestamp(self, make_series):
        series = make_series([50.0, 1000.0, 20.0, 900.0, 1000.0])
        assert find_last_quiet_timestamp(series, 100.0) == day(3)

    def test_none_found(self, make_series):
        series = make_series([500.0, 1000.0])
        assert find_last_quiet_timestamp(series, 100.0) is None

    def test_undefined_threshold(self, make_series):
        series = make_series([0.0, 0.0])
        assert find_last_quiet_timestamp(series, None) is None

    def test_empty_series(self):
        assert find_last_quiet_timestamp([], 100.0) is None

    def test_inclusive_comparison(self, make_series):
        series = make_series([100.0, 1000.0])
        assert find_last_quiet_timestamp(series, 100.0) == day(1)

    def test_ties_share_timestamp(self):
        ts = day(4)
        series = [
            VolumeSample(timestamp=day(1), volume=1000.0),
            VolumeSample(timestamp=ts, volume=10.0),
            VolumeSample(timestamp=ts, volume=20.0),
        ]
        assert find_last_quiet_timestamp(series, 100.0) == ts

    def test_accepts_tuple_series(self, make_series):
        series = tuple(make_series([10.0, 1000.0]))
        assert find_last_quiet_timestamp(series, 100.0) == day(1)
        assert isinstance(find_last_quiet_timestamp(series, 100.0), pd.Timestamp)

    def test_one_ulp_above_threshold_is_quiet(self, make_series):
        # 110.00000000000001 vs 0.1 × 1100.0000000000002 (1000/100 scaled by 1.1)
        series = make_series([1000.0 * 1.1, 100.0 * 1.1])
        threshold = derive_threshold(series)
        assert find_last_quiet_timestamp(series, threshold) == day(2)

    def test_clearly_above_threshold_not_quiet(self, make_series):
        series = make_series([1000.0, 100.001])
        assert find_last_quiet_timestamp(series, derive_threshold(series)) is None
