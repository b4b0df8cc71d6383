"""
Quiet Sample Marker for volume chart colouring

Uses the same threshold and the same quiet comparison as the recency scan,
so the highlighted bars always agree with the traffic light.
"""

import pandas as pd

from .models import VolumeSeries
from .threshold_calculator import ThresholdCalculator, quiet_mask


def mark_quiet_samples(
    series: VolumeSeries,
    fraction: float = ThresholdCalculator.DEFAULT_FRACTION
) -> pd.Series:
    """
    Per-sample quiet flags

    Args:
        series: Volume samples
        fraction: Threshold ratio of the series maximum

    Returns:
        Boolean Series indexed by timestamp (name='quiet'); all False when
        the threshold is undefined
    """
    calculator = ThresholdCalculator(fraction)
    threshold = calculator.calculate_for_series(series)

    index = pd.DatetimeIndex([s.timestamp for s in series], name='timestamp')
    volumes = pd.Series([s.volume for s in series], index=index, dtype='float64')

    return pd.Series(quiet_mask(volumes.to_numpy(), threshold), index=index, name='quiet', dtype=bool)
