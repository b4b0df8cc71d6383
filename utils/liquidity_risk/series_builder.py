"""
Series Builder for turning market-data payloads into VolumeSeries

Supported inputs:
- market_chart 응답의 total_volumes: [[epoch_ms, volume], ...]
- DataFrame (download_ohlcv CSV layout: datetime, open, high, low, close, volume)
"""

from typing import Iterable, List, Sequence
import logging
import numpy as np
import pandas as pd

from .models import VolumeSample, VolumeSeries, InvalidVolumeSeriesError

# EUC-KR 로깅 설정 (Windows용)
import sys
if sys.platform == 'win32':
    logging.basicConfig(encoding='euc-kr')

logger = logging.getLogger(__name__)


DEFAULT_WINDOW_DAYS = 365


def to_utc_timestamp(value) -> pd.Timestamp:
    """
    Normalize an instant to a tz-aware UTC pandas Timestamp

    Numbers are epoch milliseconds, naive datetimes are taken as UTC.
    """
    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        return pd.Timestamp(int(value), unit='ms', tz='UTC')

    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return ts.tz_localize('UTC')
    return ts.tz_convert('UTC')


def series_from_pairs(pairs: Iterable[Sequence[float]]) -> List[VolumeSample]:
    """
    Build a series from [epoch_ms, volume] pairs

    Args:
        pairs: Provider rows in chronological order

    Returns:
        List of VolumeSample (input order preserved)
    """
    series = []
    for row in pairs:
        if len(row) < 2:
            raise InvalidVolumeSeriesError(f"volume pair must hold [timestamp, volume], got {row!r}")
        series.append(VolumeSample(timestamp=to_utc_timestamp(row[0]), volume=float(row[1])))
    return series


def series_from_frame(
    df: pd.DataFrame,
    time_column: str = 'datetime',
    volume_column: str = 'volume'
) -> List[VolumeSample]:
    """
    Build a series from a DataFrame

    Args:
        df: DataFrame with a time column and a volume column
        time_column: Column holding datetimes (or epoch ms)
        volume_column: Column holding traded volume

    Returns:
        List of VolumeSample in row order
    """
    missing = [c for c in (time_column, volume_column) if c not in df.columns]
    if missing:
        raise InvalidVolumeSeriesError(f"DataFrame에 필요한 컬럼 없음: {missing}")

    if df.empty:
        return []

    times = df[time_column]
    if pd.api.types.is_numeric_dtype(times):
        times = pd.to_datetime(times, unit='ms', utc=True)
    else:
        times = pd.to_datetime(times, utc=True)

    # 숫자로 변환 불가능한 값은 NaN (threshold 단계에서 처리)
    volumes = pd.to_numeric(df[volume_column], errors='coerce')

    series = [
        VolumeSample(timestamp=ts, volume=float(vol))
        for ts, vol in zip(times, volumes)
    ]
    logger.debug(f"DataFrame -> VolumeSeries 변환 완료: {len(series)}개 샘플")
    return series


def trailing_window(
    series: VolumeSeries,
    now,
    days: int = DEFAULT_WINDOW_DAYS
) -> List[VolumeSample]:
    """
    Samples within [now - days, now]

    Args:
        series: Volume samples
        now: Evaluation instant
        days: Window length in days (default 365)
    """
    end = to_utc_timestamp(now)
    start = end - pd.Timedelta(days=days)
    return [s for s in series if start <= to_utc_timestamp(s.timestamp) <= end]
