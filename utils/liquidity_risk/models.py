"""
Data models for liquidity risk classifier
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Sequence
import pandas as pd


class RiskLevel(IntEnum):
    """
    Liquidity risk traffic light

    Ordered DANGER < CAUTION < SAFE so levels can be compared directly.
    """
    DANGER = 0
    CAUTION = 1
    SAFE = 2

    @property
    def color(self) -> str:
        return _TRAFFIC_LIGHT[self]


_TRAFFIC_LIGHT = {
    RiskLevel.DANGER: 'red',
    RiskLevel.CAUTION: 'yellow',
    RiskLevel.SAFE: 'green',
}


class ValidationMode(str, Enum):
    """How much the classifier trusts the incoming series"""
    TRUST = 'trust'          # 입력 그대로 사용 (precondition)
    SANITIZE = 'sanitize'    # 정렬 + 음수 clamp + NaN 제거
    STRICT = 'strict'        # 위반 시 예외


@dataclass(frozen=True)
class VolumeSample:
    """Single volume observation (UTC timestamp, traded volume)"""
    timestamp: pd.Timestamp
    volume: float


VolumeSeries = Sequence[VolumeSample]


@dataclass(frozen=True)
class RiskAssessment:
    """Result of one liquidity risk evaluation"""
    level: RiskLevel
    threshold: Optional[float]
    last_quiet_at: Optional[pd.Timestamp]
    elapsed_days: Optional[int]
    sample_count: int
    evaluated_at: pd.Timestamp


class LiquidityRiskError(Exception):
    """Base class for liquidity risk errors"""
    pass


class InvalidVolumeSeriesError(LiquidityRiskError):
    """Raised when a volume series violates its preconditions"""
    pass


class InvalidThresholdFractionError(LiquidityRiskError):
    """Raised when the threshold fraction is outside [0, 1]"""
    pass


class ConfigurationError(LiquidityRiskError):
    """Raised when configuration values cannot be parsed or are inconsistent"""
    pass
