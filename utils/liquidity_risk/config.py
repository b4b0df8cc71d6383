"""
Configuration for liquidity risk classification

Environment overrides:
- LIQUIDITY_THRESHOLD_FRACTION (기본값: 0.1)
- LIQUIDITY_SAFE_DAYS (기본값: 10)
- LIQUIDITY_CAUTION_DAYS (기본값: 30)
- LIQUIDITY_WINDOW_DAYS (기본값: 365)
- LIQUIDITY_VALIDATION: trust / sanitize / strict (기본값: trust)
"""

from dataclasses import dataclass
import os

from .models import ValidationMode, ConfigurationError, InvalidThresholdFractionError
from .threshold_calculator import ThresholdCalculator, validate_fraction
from .risk_classifier import DEFAULT_SAFE_DAYS, DEFAULT_CAUTION_DAYS, validate_bands
from .series_builder import DEFAULT_WINDOW_DAYS


@dataclass(frozen=True)
class LiquidityRiskConfig:
    fraction: float = ThresholdCalculator.DEFAULT_FRACTION
    safe_days: int = DEFAULT_SAFE_DAYS
    caution_days: int = DEFAULT_CAUTION_DAYS
    window_days: int = DEFAULT_WINDOW_DAYS
    validation: ValidationMode = ValidationMode.TRUST

    def __post_init__(self):
        try:
            validate_fraction(self.fraction)
        except InvalidThresholdFractionError as e:
            raise ConfigurationError(str(e)) from e
        validate_bands(self.safe_days, self.caution_days)
        if self.window_days <= 0:
            raise ConfigurationError(f"window_days must be positive, got {self.window_days}")

    @classmethod
    def from_env(cls, environ=None) -> 'LiquidityRiskConfig':
        """Build a config from environment variables, falling back to defaults"""
        env = os.environ if environ is None else environ

        try:
            fraction = float(env.get('LIQUIDITY_THRESHOLD_FRACTION', str(ThresholdCalculator.DEFAULT_FRACTION)))
            safe_days = int(env.get('LIQUIDITY_SAFE_DAYS', str(DEFAULT_SAFE_DAYS)))
            caution_days = int(env.get('LIQUIDITY_CAUTION_DAYS', str(DEFAULT_CAUTION_DAYS)))
            window_days = int(env.get('LIQUIDITY_WINDOW_DAYS', str(DEFAULT_WINDOW_DAYS)))
            validation = ValidationMode(env.get('LIQUIDITY_VALIDATION', 'trust').lower())
        except ValueError as e:
            raise ConfigurationError(f"잘못된 환경 변수 값: {e}") from e

        return cls(
            fraction=fraction,
            safe_days=safe_days,
            caution_days=caution_days,
            window_days=window_days,
            validation=validation,
        )
