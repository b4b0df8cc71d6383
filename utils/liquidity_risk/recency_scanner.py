"""
Recency Scanner for locating the most recent quiet sample

Single forward pass over the series, O(n) time and O(1) extra space
"""

from typing import Optional
import pandas as pd

from .models import VolumeSeries
from .threshold_calculator import is_quiet


def find_last_quiet_timestamp(
    series: VolumeSeries,
    threshold: Optional[float]
) -> Optional[pd.Timestamp]:
    """
    Timestamp of the latest sample with volume <= threshold

    Timestamps are non-decreasing, so the last quiet sample met during the
    forward scan is also the latest one. Samples sharing that timestamp
    all yield the same result.

    Args:
        series: Chronologically ordered volume samples (not modified)
        threshold: Activity threshold, None when undefined

    Returns:
        Timestamp of the last quiet sample, or None if there is none
    """
    # threshold 미정의 = 데이터 없음
    if threshold is None:
        return None

    last_quiet = None
    for sample in series:
        if is_quiet(sample.volume, threshold):
            last_quiet = sample.timestamp

    return last_quiet
