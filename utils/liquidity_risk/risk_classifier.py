"""
Risk Classifier mapping quiet-period recency to a traffic light

Pipeline: series -> threshold -> last quiet timestamp -> RiskLevel

Bands (elapsed whole days since last quiet sample, inclusive, first match):
- elapsed <= 10 -> SAFE
- elapsed <= 30 -> CAUTION
- otherwise     -> DANGER
No quiet sample at all -> DANGER
"""

import math
from typing import Optional
import logging
import pandas as pd

from .models import (
    RiskLevel,
    RiskAssessment,
    ValidationMode,
    VolumeSeries,
    ConfigurationError,
)
from .threshold_calculator import ThresholdCalculator
from .recency_scanner import find_last_quiet_timestamp
from .series_builder import to_utc_timestamp
from .series_validator import prepare_series

# EUC-KR 로깅 설정 (Windows용)
import sys
if sys.platform == 'win32':
    logging.basicConfig(encoding='euc-kr')

logger = logging.getLogger(__name__)


# 상수 정의
MS_PER_DAY = 86_400_000
ONE_DAY = pd.Timedelta(milliseconds=MS_PER_DAY)
DEFAULT_SAFE_DAYS = 10
DEFAULT_CAUTION_DAYS = 30


def validate_bands(safe_days: int, caution_days: int) -> None:
    if safe_days < 0:
        raise ConfigurationError(f"safe_days must not be negative, got {safe_days}")
    if safe_days > caution_days:
        raise ConfigurationError(
            f"safe_days ({safe_days}) must not exceed caution_days ({caution_days})"
        )


def elapsed_days(last_quiet_at, now) -> int:
    """
    Whole days between last_quiet_at and now, rounded half up

    10.4 -> 10, 10.5 -> 11, 10.6 -> 11
    """
    delta = to_utc_timestamp(now) - to_utc_timestamp(last_quiet_at)
    return int(math.floor(delta / ONE_DAY + 0.5))


def classify_elapsed(
    last_quiet_at: Optional[pd.Timestamp],
    now,
    safe_days: int = DEFAULT_SAFE_DAYS,
    caution_days: int = DEFAULT_CAUTION_DAYS
) -> RiskLevel:
    """
    Map the last quiet timestamp to a RiskLevel

    Args:
        last_quiet_at: Result of the recency scan, None if nothing was quiet
        now: Evaluation instant (injected, never read from the clock here)
        safe_days: Upper bound (inclusive) of the SAFE band
        caution_days: Upper bound (inclusive) of the CAUTION band
    """
    if last_quiet_at is None:
        return RiskLevel.DANGER
    return _band_for(elapsed_days(last_quiet_at, now), safe_days, caution_days)


def _band_for(elapsed: int, safe_days: int, caution_days: int) -> RiskLevel:
    if elapsed <= safe_days:
        return RiskLevel.SAFE
    if elapsed <= caution_days:
        return RiskLevel.CAUTION
    return RiskLevel.DANGER


def assess_liquidity_risk(
    series: VolumeSeries,
    now,
    fraction: float = ThresholdCalculator.DEFAULT_FRACTION,
    validation: ValidationMode = ValidationMode.TRUST,
    safe_days: int = DEFAULT_SAFE_DAYS,
    caution_days: int = DEFAULT_CAUTION_DAYS
) -> RiskAssessment:
    """
    Run the full pipeline and keep the intermediate values

    Args:
        series: Volume samples in chronological order (may be empty)
        now: Evaluation instant
        fraction: Threshold ratio of the series maximum
        validation: Boundary validation mode (TRUST by default)
        safe_days: SAFE band limit in days
        caution_days: CAUTION band limit in days

    Returns:
        RiskAssessment with level, threshold, last quiet timestamp and elapsed days
    """
    validate_bands(safe_days, caution_days)
    calculator = ThresholdCalculator(fraction)
    evaluated_at = to_utc_timestamp(now)

    series = prepare_series(series, validation)
    threshold = calculator.calculate_for_series(series)
    last_quiet_at = find_last_quiet_timestamp(series, threshold)

    if last_quiet_at is None:
        # 데이터 부족 -> 가장 보수적인 DANGER
        logger.debug(
            f"quiet 샘플 없음 (samples={len(series)}, threshold={threshold}) -> DANGER"
        )
        elapsed = None
        level = RiskLevel.DANGER
    else:
        elapsed = elapsed_days(last_quiet_at, evaluated_at)
        level = _band_for(elapsed, safe_days, caution_days)

    return RiskAssessment(
        level=level,
        threshold=threshold,
        last_quiet_at=last_quiet_at,
        elapsed_days=elapsed,
        sample_count=len(series),
        evaluated_at=evaluated_at,
    )


def classify_liquidity_risk(
    series: VolumeSeries,
    now,
    fraction: float = ThresholdCalculator.DEFAULT_FRACTION,
    validation: ValidationMode = ValidationMode.TRUST
) -> RiskLevel:
    """Liquidity risk level for a volume series evaluated at now"""
    return assess_liquidity_risk(series, now, fraction, validation).level
