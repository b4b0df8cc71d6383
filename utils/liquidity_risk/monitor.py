"""
Per-asset holder of the latest liquidity risk assessment

Each update recomputes from scratch; the newest assessment replaces the
previous one (last write wins). No history is kept.
"""

from typing import Dict, List, Optional
import threading
import logging

from .config import LiquidityRiskConfig
from .models import RiskAssessment, VolumeSeries
from .risk_classifier import assess_liquidity_risk

# EUC-KR 로깅 설정 (Windows용)
import sys
if sys.platform == 'win32':
    logging.basicConfig(encoding='euc-kr')

logger = logging.getLogger(__name__)


class LiquidityRiskMonitor:
    """
    Tracks the current traffic light for every asset the caller feeds

    The classification runs outside the lock; only the dictionary swap is
    guarded, so updates for different assets never wait on each other's
    computation.
    """

    def __init__(self, config: Optional[LiquidityRiskConfig] = None):
        self.config = config or LiquidityRiskConfig()
        self._assessments: Dict[str, RiskAssessment] = {}
        self._lock = threading.Lock()

    def update(self, asset_id: str, series: VolumeSeries, now) -> RiskAssessment:
        """
        Recompute the assessment for asset_id from a fresh series

        Args:
            asset_id: Asset identifier (e.g. 'bitcoin')
            series: Newly received volume series
            now: Evaluation instant
        """
        cfg = self.config
        assessment = assess_liquidity_risk(
            series,
            now,
            fraction=cfg.fraction,
            validation=cfg.validation,
            safe_days=cfg.safe_days,
            caution_days=cfg.caution_days,
        )

        with self._lock:
            previous = self._assessments.get(asset_id)
            self._assessments[asset_id] = assessment

        if previous is not None and previous.level != assessment.level:
            logger.info(
                f"[{asset_id}] risk level 변경: {previous.level.name} -> {assessment.level.name}"
            )
        return assessment

    def get(self, asset_id: str) -> Optional[RiskAssessment]:
        with self._lock:
            return self._assessments.get(asset_id)

    def assets(self) -> List[str]:
        with self._lock:
            return sorted(self._assessments)

    def forget(self, asset_id: str) -> None:
        with self._lock:
            self._assessments.pop(asset_id, None)
