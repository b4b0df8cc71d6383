"""
Liquidity Risk Classification for a daily volume CSV

Reads a CSV in the download_ohlcv layout (datetime, open, high, low, close, volume),
keeps the trailing window and prints the traffic light:
- green  (SAFE): quiet volume within the last 10 days
- yellow (CAUTION): quiet volume within the last 30 days
- red    (DANGER): no quiet volume for more than 30 days, or no data

Usage:
    python main_classify_liquidity.py BTCUSDT.P_2022-06-01_2025-10-31.csv
    python main_classify_liquidity.py daily.csv --asset bitcoin --now 2025-10-31T00:00:00Z

환경 변수:
- ASSET_ID: --asset 미지정 시 로그에 표시할 자산 이름 (기본값: CSV 파일 이름)
- LIQUIDITY_NOW: --now 미지정 시 평가 시점 (ISO 8601, 기본값: 현재 UTC 시각)
- LIQUIDITY_THRESHOLD_FRACTION / LIQUIDITY_SAFE_DAYS / LIQUIDITY_CAUTION_DAYS /
  LIQUIDITY_WINDOW_DAYS / LIQUIDITY_VALIDATION: LiquidityRiskConfig 참고
"""

from datetime import datetime, timezone
import argparse
import logging
import sys
import os

import pandas as pd

from utils.liquidity_risk import (
    LiquidityRiskConfig,
    LiquidityRiskMonitor,
    mark_quiet_samples,
    series_from_frame,
    trailing_window,
    to_utc_timestamp,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Liquidity risk traffic light for a volume CSV")
    parser.add_argument("csv_path", nargs="?", help="Volume CSV (datetime, ..., volume)")
    parser.add_argument("--asset", default=None, help="Asset name for logs (fallback: ASSET_ID, CSV file name)")
    parser.add_argument("--now", default=None, help="Evaluation instant, ISO 8601 (fallback: LIQUIDITY_NOW, current UTC)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if not args.csv_path:
        logger.error("CSV 파일 경로가 필요합니다: python main_classify_liquidity.py <csv>")
        return 1

    csv_path = args.csv_path
    asset_id = args.asset or os.getenv('ASSET_ID', os.path.splitext(os.path.basename(csv_path))[0])

    logger.info("=" * 80)
    logger.info(f"Liquidity Risk 분류 시작: {asset_id}")
    logger.info("=" * 80)

    try:
        config = LiquidityRiskConfig.from_env()
        now_arg = args.now or os.getenv('LIQUIDITY_NOW')
        now = to_utc_timestamp(now_arg if now_arg else datetime.now(timezone.utc))

        logger.info(f"CSV 로드 중: {csv_path}")
        df = pd.read_csv(csv_path)
        series = trailing_window(series_from_frame(df), now, days=config.window_days)

        logger.info(f"평가 시점: {now}")
        logger.info(f"Trailing window: {config.window_days}일, 샘플 {len(series)}개")
        logger.info(f"Threshold fraction: {config.fraction}, validation: {config.validation.value}")

        monitor = LiquidityRiskMonitor(config)
        assessment = monitor.update(asset_id, series, now)
        quiet = mark_quiet_samples(series, config.fraction)

        logger.info("=" * 80)
        logger.info(f"✅ {asset_id}: {assessment.level.name} ({assessment.level.color})")
        logger.info(f"  - threshold: {assessment.threshold}")
        logger.info(f"  - 마지막 quiet 시점: {assessment.last_quiet_at}")
        logger.info(f"  - 경과 일수: {assessment.elapsed_days}")
        logger.info(f"  - quiet 샘플: {int(quiet.sum())}/{len(quiet)}")
        logger.info("=" * 80)

        print(assessment.level.color)
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자에 의해 중단되었습니다.")
        return 1

    except Exception as e:
        logger.error(f"오류 발생: {str(e)}", exc_info=True)
        return 1


if __name__ == '__main__':
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True  # 기존 설정 강제 덮어쓰기
    )
    exit_code = main()
    sys.exit(exit_code)
