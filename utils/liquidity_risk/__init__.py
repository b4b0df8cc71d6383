"""
Liquidity Risk Classifier Module

This module classifies how recently an asset's trading volume dipped to or
below 10% of its trailing-window maximum, as a SAFE / CAUTION / DANGER
traffic light.
"""

from .models import (
    RiskLevel,
    RiskAssessment,
    ValidationMode,
    VolumeSample,
    VolumeSeries,
    LiquidityRiskError,
    InvalidVolumeSeriesError,
    InvalidThresholdFractionError,
    ConfigurationError,
)
from .threshold_calculator import ThresholdCalculator, derive_threshold
from .recency_scanner import find_last_quiet_timestamp
from .risk_classifier import (
    classify_elapsed,
    assess_liquidity_risk,
    classify_liquidity_risk,
)
from .series_builder import series_from_pairs, series_from_frame, trailing_window, to_utc_timestamp
from .series_validator import prepare_series
from .quiet_marker import mark_quiet_samples
from .config import LiquidityRiskConfig
from .monitor import LiquidityRiskMonitor

__all__ = [
    'RiskLevel',
    'RiskAssessment',
    'ValidationMode',
    'VolumeSample',
    'VolumeSeries',
    'LiquidityRiskError',
    'InvalidVolumeSeriesError',
    'InvalidThresholdFractionError',
    'ConfigurationError',
    'ThresholdCalculator',
    'derive_threshold',
    'find_last_quiet_timestamp',
    'classify_elapsed',
    'assess_liquidity_risk',
    'classify_liquidity_risk',
    'series_from_pairs',
    'series_from_frame',
    'trailing_window',
    'to_utc_timestamp',
    'prepare_series',
    'mark_quiet_samples',
    'LiquidityRiskConfig',
    'LiquidityRiskMonitor',
]
