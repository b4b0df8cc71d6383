"""
Threshold Calculator for deriving the quiet-volume activity threshold

threshold = fraction × max(volume) over the observed series
"""

import math
import numpy as np
from typing import Optional
import logging

from .models import VolumeSeries, InvalidThresholdFractionError

# EUC-KR 로깅 설정 (Windows용)
import sys
if sys.platform == 'win32':
    logging.basicConfig(encoding='euc-kr')

logger = logging.getLogger(__name__)


def validate_fraction(fraction: float) -> float:
    """
    Check that fraction lies in [0, 1]

    Raises:
        InvalidThresholdFractionError: fraction is NaN or out of range
    """
    if not (0.0 <= fraction <= 1.0):
        raise InvalidThresholdFractionError(
            f"threshold fraction must be within [0, 1], got {fraction!r}"
        )
    return float(fraction)


class ThresholdCalculator:
    """
    Derives the activity threshold from a volume series

    A sample whose volume is at or below the threshold counts as quiet.
    The threshold is recomputed for every series and never shared between
    assets or windows.
    """

    # 상수 정의
    DEFAULT_FRACTION = 0.1
    # threshold와 1 ulp 차이나는 volume도 quiet (스케일 불변성)
    QUIET_RTOL = 1e-12

    def __init__(self, fraction: float = DEFAULT_FRACTION):
        """
        Args:
            fraction: Ratio of the series maximum used as threshold (default 0.1 = 10%)
        """
        self.fraction = validate_fraction(fraction)

    def calculate_threshold(self, volumes: np.ndarray) -> Optional[float]:
        """
        Calculate fraction × max(volumes)

        Args:
            volumes: Array of sample volumes in series order

        Returns:
            Threshold value, or None when the series is empty or contains
            NaN/Inf (treated downstream as "no data")
        """
        # 빈 배열 -> max 정의 불가
        if len(volumes) == 0:
            return None

        if not self.validate_inputs(volumes):
            logger.warning("유효하지 않은 volumes 배열 (NaN 또는 Inf 포함), threshold 미정의")
            return None

        max_volume = float(np.max(volumes))
        return self.fraction * max_volume

    def calculate_for_series(self, series: VolumeSeries) -> Optional[float]:
        """Convenience wrapper over calculate_threshold for VolumeSample sequences"""
        volumes = np.fromiter((s.volume for s in series), dtype=np.float64, count=len(series))
        return self.calculate_threshold(volumes)

    def validate_inputs(self, volumes: np.ndarray) -> bool:
        """
        Validate input array for NaN and Infinity values

        Returns:
            True if valid, False if contains NaN or Inf
        """
        return bool(np.all(np.isfinite(volumes)))


def is_quiet(volume: float, threshold: Optional[float]) -> bool:
    """
    volume <= threshold, with a relative tolerance at the boundary
    """
    if threshold is None:
        return False
    return volume <= threshold or math.isclose(volume, threshold, rel_tol=ThresholdCalculator.QUIET_RTOL)


def quiet_mask(volumes: np.ndarray, threshold: Optional[float]) -> np.ndarray:
    """Vectorised is_quiet over an array of volumes"""
    if threshold is None:
        return np.zeros(len(volumes), dtype=bool)
    # math.isclose와 동일한 대칭 비교
    tolerance = ThresholdCalculator.QUIET_RTOL * np.maximum(np.abs(volumes), abs(threshold))
    return (volumes <= threshold) | (np.abs(volumes - threshold) <= tolerance)


def derive_threshold(
    series: VolumeSeries,
    fraction: float = ThresholdCalculator.DEFAULT_FRACTION
) -> Optional[float]:
    """Activity threshold for a series, None when undefined"""
    return ThresholdCalculator(fraction).calculate_for_series(series)
