"""
Series Validator applied at the classifier boundary

TRUST    -> input used as given (chronological, non-negative by contract)
SANITIZE -> drop non-finite volumes, clamp negatives to 0, stable sort
STRICT   -> raise InvalidVolumeSeriesError on any violation
"""

import math
from typing import List
import logging

from .models import VolumeSample, VolumeSeries, ValidationMode, InvalidVolumeSeriesError
from .series_builder import to_utc_timestamp

# EUC-KR 로깅 설정 (Windows용)
import sys
if sys.platform == 'win32':
    logging.basicConfig(encoding='euc-kr')

logger = logging.getLogger(__name__)


def prepare_series(series: VolumeSeries, mode: ValidationMode = ValidationMode.TRUST) -> VolumeSeries:
    """
    Apply the requested validation mode

    Returns the input untouched in TRUST mode, otherwise a new list.
    """
    mode = ValidationMode(mode)

    if mode is ValidationMode.TRUST:
        return series
    if mode is ValidationMode.STRICT:
        check_series(series)
        return series
    return sanitize_series(series)


def check_series(series: VolumeSeries) -> None:
    """
    Raise on negative/non-finite volume or out-of-order timestamps

    Raises:
        InvalidVolumeSeriesError
    """
    previous = None
    for idx, sample in enumerate(series):
        if not math.isfinite(sample.volume):
            raise InvalidVolumeSeriesError(f"non-finite volume at index {idx}: {sample.volume!r}")
        if sample.volume < 0:
            raise InvalidVolumeSeriesError(f"negative volume at index {idx}: {sample.volume!r}")

        current = to_utc_timestamp(sample.timestamp)
        if previous is not None and current < previous:
            raise InvalidVolumeSeriesError(
                f"timestamps out of order at index {idx}: {current} < {previous}"
            )
        previous = current


def sanitize_series(series: VolumeSeries) -> List[VolumeSample]:
    """Repair a series instead of rejecting it, logging every repair"""
    cleaned = []
    dropped = 0
    clamped = 0

    for sample in series:
        if not math.isfinite(sample.volume):
            dropped += 1
            continue

        volume = sample.volume
        if volume < 0:
            clamped += 1
            volume = 0.0

        cleaned.append(VolumeSample(timestamp=to_utc_timestamp(sample.timestamp), volume=volume))

    if dropped:
        logger.warning(f"non-finite volume 샘플 {dropped}개 제거")
    if clamped:
        logger.warning(f"음수 volume 샘플 {clamped}개 0으로 보정")

    is_sorted = all(a.timestamp <= b.timestamp for a, b in zip(cleaned, cleaned[1:]))
    if not is_sorted:
        logger.warning("timestamp 순서가 뒤섞인 series 정렬")
        # sorted는 stable이므로 동일 timestamp의 순서 유지
        cleaned = sorted(cleaned, key=lambda s: s.timestamp)

    return cleaned
