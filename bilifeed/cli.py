"""Collect yesterday's Bilibili following-feed posts and export them to Markdown.

Usage examples:
  bilifeed                               # open t.bilibili.com, scroll, export yesterday
  bilifeed --yes --out exports/          # skip the confirmation prompt
  bilifeed --html saved_feed.html        # offline: parse a saved page, no scrolling
  bilifeed --today --html saved_feed.html

Notes:
- Reuse a logged-in browser session via BILIFEED_STORAGE_STATE (a Playwright
  storage_state JSON file). Logging in is not handled here.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from bilifeed.constants import CollectMode
from bilifeed.core.config import settings, validate_settings
from bilifeed.core.logging import logger, setup_logging
from bilifeed.errors import BilifeedError
from bilifeed.host import StaticHost
from bilifeed.session import ExportSession, RunResult, run_collection
from bilifeed.sink import FileSink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bilifeed", description="导出B站关注动态为 Markdown")
    parser.add_argument("--html", type=str, default=None, help="读取保存的动态页 HTML，而不是打开浏览器")
    parser.add_argument("--out", type=str, default=settings.output_dir, help="导出目录")
    parser.add_argument("--yes", "-y", action="store_true", help="不询问，直接导出")
    parser.add_argument("--today", action="store_true", help="采集今天的动态（不滚动）")
    parser.add_argument("--log-level", type=str, default=settings.log_level)
    return parser


async def _run(args: argparse.Namespace) -> Optional[RunResult]:
    mode = CollectMode.TODAY if args.today else CollectMode.YESTERDAY
    session = ExportSession(settings=settings)
    sink = FileSink(args.out, assume_yes=args.yes)

    if args.html:
        host = StaticHost.from_file(args.html)
        return await run_collection(session, host, sink, mode=mode)

    from bilifeed.core.browser_manager import PlaywrightHost

    async with PlaywrightHost(settings) as host:
        return await run_collection(session, host, sink, mode=mode)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, fmt=settings.log_format)

    try:
        validate_settings(settings)
    except RuntimeError as e:
        logger.error(f"配置错误: {e}")
        return 1

    try:
        result = asyncio.run(_run(args))
    except BilifeedError as e:
        hint = "（可重试）" if e.retryable else ""
        logger.error(f"采集失败{hint}: {e}")
        return 1

    if result is not None and result.path is not None:
        print(result.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
