"""bilifeed 日志模块

- 使用 loguru。
- 通过 contextvars 注入 `run_id`，使一次采集中的 `logger.info(...)` 自动带上运行 ID。
"""

from __future__ import annotations

import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from loguru import logger as _base_logger


_run_id: ContextVar[Optional[str]] = ContextVar("run_id", default=None)


def _patch_record(record: dict) -> dict:
    record_extra = record.get("extra")
    if record_extra is None:
        record_extra = {}
        record["extra"] = record_extra

    record_extra.setdefault("run_id", _run_id.get())
    return record


logger = _base_logger.patch(_patch_record)


def new_run_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def log_context(*, run_id: Optional[str] = None) -> Iterator[None]:
    token = _run_id.set(run_id) if run_id is not None else None
    try:
        yield
    finally:
        if token is not None:
            _run_id.reset(token)


def setup_logging(*, level: str = "INFO", fmt: str = "text", debug: bool = False) -> None:
    """设置日志配置

    参数:
        level: 日志级别。
        fmt: 'json' 或 'text'。
        debug: 是否启用 loguru 的 backtrace/diagnose。
    """
    logger.remove()

    if fmt.lower() == "json":
        logger.add(
            sys.stderr,
            level=level.upper(),
            serialize=True,
            backtrace=debug,
            diagnose=debug,
        )
        return

    # text format - 仅在有运行ID时显示
    def format_message(record):
        parts = ["{time:YYYY-MM-DD HH:mm:ss}", "|", "{level:<8}", "|"]

        run_id = record["extra"].get("run_id")
        if run_id:
            parts.append(f" run={run_id[:8]} -")

        parts.append(" {name}:{function} -")
        parts.append(" {message}")
        return "".join(parts) + "\n{exception}"

    logger.add(
        sys.stderr,
        level=level.upper(),
        format=format_message,
        backtrace=debug,
        diagnose=debug,
    )
