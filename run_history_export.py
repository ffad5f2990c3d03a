import argparse
import asyncio
import json
import os
import sys

from loguru import logger

from abucoins_sdk import AbucoinsError, Client, HistoryParams
from exporter.history_logger import HISTORY_KINDS, HistoryLogger
from exporter.settings import load_settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export one page of Abucoins account history to CSV")
    parser.add_argument("kind", choices=sorted(HISTORY_KINDS))
    parser.add_argument("--before", help="page before (newer than) this pagination id")
    parser.add_argument("--after", help="page after (older than) this pagination id")
    parser.add_argument("--limit", type=int, help="results per request (max 1000, default 100)")
    parser.add_argument("--config", default=None, help="YAML config (default configs/abucoins.yaml)")
    parser.add_argument("--out-dir", dest="out_dir", default=None)
    parser.add_argument("--debug", action="store_true", help="print raw JSON instead of writing CSV")
    return parser.parse_args(argv)


def setup_logging(log_dir: str = "logs") -> None:
    logger.enable("abucoins_sdk")
    # logs ディレクトリへファイル出力（全レベル）
    try:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            os.path.join(log_dir, "run_history_export.log"),
            level="DEBUG",
            rotation="10 MB",
            retention="14 days",
            encoding="utf-8",
            enqueue=True,
            backtrace=False,
            diagnose=False,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}",
        )
    except OSError as e:
        # ファイル出力に失敗しても実行は継続（標準出力は残す）
        logger.warning("file logging disabled: {}", e)


async def fetch_page(client: Client, kind: str, params: HistoryParams):
    if kind == "fills":
        return await client.trade_history(params)
    if kind == "deposits":
        return await client.deposit_history(params)
    return await client.withdrawal_history(params)


async def main(argv=None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.config, out_dir=args.out_dir)
    setup_logging(settings.out_dir)
    logger.info("abucoins endpoint={}, kind={}", settings.options.endpoint, args.kind)

    params = HistoryParams(before=args.before, after=args.after, limit=args.limit)
    try:
        async with Client(settings.options) as client:
            rows = await fetch_page(client, args.kind, params)
    except AbucoinsError as e:
        logger.error("{} request failed ({}): {}", args.kind, type(e).__name__, e)
        return 1

    if args.debug:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return 0

    if not isinstance(rows, list):
        logger.error("{} response is not a list of records: {}", args.kind, rows)
        return 1

    history_logger = HistoryLogger(settings.out_dir)
    written = history_logger.append(args.kind, rows)
    logger.info("{} rows appended to {}", written, history_logger.path_for(args.kind))

    cursor = history_logger.last_cursor(args.kind, rows)
    if cursor is not None:
        logger.info("next page: --after {}", cursor)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("stopped by user")
