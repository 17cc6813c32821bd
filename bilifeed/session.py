"""
采集会话

一个 ExportSession 同一时刻只允许一次采集：进入时置位、退出时（包括异常）清除，
因此前一次失败不会让之后的采集永久被锁住。并发调用不报错，直接返回 None。
"""
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional

from bilifeed.collector import collect
from bilifeed.constants import CollectMode
from bilifeed.core.config import Settings, settings as default_settings
from bilifeed.core.logging import log_context, logger, new_run_id
from bilifeed.core.time_utils import AsyncioClock, Clock
from bilifeed.host import FeedHost
from bilifeed.parser.models import FeedItem
from bilifeed.render import render_report, suggested_filename
from bilifeed.scroll import DebugTrace, converge_on_yesterday
from bilifeed.sink import DeliverySink


@dataclass
class RunResult:
    """一次采集的结果"""
    run_id: str
    items: List[FeedItem]
    trace: DebugTrace
    document: Optional[str] = None  # 用户取消导出时为空
    filename: Optional[str] = None
    path: Optional[Path] = None

    @property
    def exported(self) -> bool:
        return self.document is not None


@dataclass
class ExportSession:
    """运行句柄，替代全局的 running 标志"""
    settings: Settings = field(default_factory=lambda: default_settings)
    clock: Clock = field(default_factory=AsyncioClock)
    running: bool = False
    runs: int = 0


async def run_collection(
    session: ExportSession,
    host: FeedHost,
    sink: DeliverySink,
    *,
    mode: CollectMode = CollectMode.YESTERDAY,
    today: Optional[date] = None,
) -> Optional[RunResult]:
    """
    采集并导出

    昨天模式先滚动到收敛再采集；今天模式或宿主不可滚动时直接采集当前快照。

    Args:
        session: 会话；已有采集在进行时直接返回 None
        host: 宿主环境
        sink: 导出目标
        mode: 采集模式
        today: 用于计算导出文件名的日期，默认为当天

    Returns:
        Optional[RunResult]: 本次采集结果
    """
    if session.running:
        logger.warning("已有采集在进行，忽略本次请求")
        return None

    session.running = True
    run_id = new_run_id()
    try:
        with log_context(run_id=run_id):
            mode = CollectMode(mode)
            trace = DebugTrace(mode=mode.value)
            logger.info(f"开始采集: {mode.value}")

            if mode == CollectMode.YESTERDAY:
                if getattr(host, "scrollable", True):
                    await converge_on_yesterday(host, session.clock, session.settings, trace)
                else:
                    logger.info("页面内容固定，跳过滚动")

            snapshot = await host.snapshot()
            items = collect(snapshot, mode)
            trace.total_collected = len(items)
            logger.info(f"采集完成: {len(items)} 条")

            result = RunResult(run_id=run_id, items=items, trace=trace)
            if not sink.confirm(len(items)):
                logger.info("用户取消导出")
                return result

            result.document = render_report(items, trace)
            result.filename = suggested_filename(today, mode)
            result.path = sink.deliver(result.document, result.filename)
            return result
    finally:
        session.running = False
        session.runs += 1


async def start_yesterday(
    session: ExportSession,
    host: FeedHost,
    sink: DeliverySink,
    *,
    today: Optional[date] = None,
) -> Optional[RunResult]:
    """收集昨天"""
    return await run_collection(session, host, sink, mode=CollectMode.YESTERDAY, today=today)
