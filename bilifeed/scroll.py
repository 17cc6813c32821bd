"""
滚动收敛

动态页没有可用的分页游标，只能不断滚动到底部并观察已渲染的卡片，判断"昨天"的动态是否已全部加载。

判定规则：
- 只有出现"2天前"的卡片后才开始计数（说明已经滚过了昨天的全部内容）；
- 之后昨天的数量连续 3 轮不变即视为收敛（虚拟列表的挂载/卸载可能造成短暂抖动）；
- 最多滚动 60 轮，超过后静默结束，调用方使用当前已渲染的内容。

状态机：Scrolling -> Settling -> (Scrolling | Stabilizing) -> ... -> Converged | Exhausted
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from bilifeed.constants import STOP_REASON_STABLE, VERSION, CollectMode, TimeBucket
from bilifeed.core.config import Settings, settings as default_settings
from bilifeed.core.logging import logger
from bilifeed.core.time_utils import Clock, utcnow_iso
from bilifeed.host import FeedHost
from bilifeed.parser import classify


class ScrollState(str, Enum):
    SCROLLING = "scrolling"  # 尚未出现 2天前，继续滚动
    SETTLING = "settling"  # 已发出滚动命令，等待渲染
    STABILIZING = "stabilizing"  # 已出现 2天前，统计昨天数量是否稳定
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"


@dataclass
class RoundObservation:
    round: int
    yesterday_count: int
    saw_two_days_ago: bool
    stable_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round,
            "yesterdayCount": self.yesterday_count,
            "sawTwoDaysAgo": self.saw_two_days_ago,
            "stableCount": self.stable_count,
        }


@dataclass
class DebugTrace:
    """
    一次采集的调试信息

    未收敛（轮数耗尽）时 scroll_rounds / stop_reason 保持为空，导出时不出现。
    导出的键名沿用 userscript 的 camelCase（startTime、scrollRounds 等）。
    """
    mode: str = CollectMode.YESTERDAY.value
    start_time: str = field(default_factory=utcnow_iso)
    version: str = VERSION
    scroll_rounds: Optional[int] = None
    stop_reason: Optional[str] = None
    total_collected: Optional[int] = None
    rounds: List[RoundObservation] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.stop_reason is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "mode": self.mode,
            "startTime": self.start_time,
            "version": self.version,
        }
        if self.scroll_rounds is not None:
            data["scrollRounds"] = self.scroll_rounds
        if self.stop_reason is not None:
            data["stopReason"] = self.stop_reason
        if self.total_collected is not None:
            data["totalCollected"] = self.total_collected
        if self.rounds:
            data["rounds"] = [r.to_dict() for r in self.rounds]
        return data


class ScrollConvergence:
    """滚动收敛状态机，不做任何 I/O，由 converge_on_yesterday 驱动"""

    def __init__(self, max_rounds: int = 60, stable_rounds: int = 3):
        self.max_rounds = max_rounds
        self.stable_rounds = stable_rounds

        self.state = ScrollState.SCROLLING
        self.round = 0
        self.stable_count = 0
        self.last_count = 0
        self.saw_two_days_ago = False  # 一旦为 True 不再重置
        self.observations: List[RoundObservation] = []

    @property
    def done(self) -> bool:
        return self.state in (ScrollState.CONVERGED, ScrollState.EXHAUSTED)

    def begin_round(self) -> int:
        """进入新一轮：滚动命令已发出，等待渲染"""
        if self.done:
            raise RuntimeError(f"滚动已结束: {self.state.value}")
        if self.state == ScrollState.SETTLING:
            raise RuntimeError("上一轮尚未观察快照")
        self.round += 1
        self.state = ScrollState.SETTLING
        return self.round

    def observe(self, labels: Iterable[str]) -> ScrollState:
        """
        读取本轮快照中所有卡片的时间标签，更新计数并决定下一个状态

        Args:
            labels: 当前已渲染卡片的时间标签

        Returns:
            ScrollState: 新状态
        """
        if self.state != ScrollState.SETTLING:
            raise RuntimeError(f"当前状态不能观察快照: {self.state.value}")

        yesterday_count = 0
        for label in labels:
            bucket = classify(label)
            if bucket == TimeBucket.YESTERDAY:
                yesterday_count += 1
            elif bucket == TimeBucket.TWO_DAYS_AGO:
                self.saw_two_days_ago = True

        if self.saw_two_days_ago:
            if yesterday_count == self.last_count:
                self.stable_count += 1
            else:
                self.stable_count = 0

        self.observations.append(RoundObservation(
            round=self.round,
            yesterday_count=yesterday_count,
            saw_two_days_ago=self.saw_two_days_ago,
            stable_count=self.stable_count,
        ))
        self.last_count = yesterday_count

        if self.saw_two_days_ago and self.stable_count >= self.stable_rounds:
            self.state = ScrollState.CONVERGED
        elif self.round >= self.max_rounds:
            self.state = ScrollState.EXHAUSTED
        elif self.saw_two_days_ago:
            self.state = ScrollState.STABILIZING
        else:
            self.state = ScrollState.SCROLLING
        return self.state

    def apply_to(self, trace: DebugTrace) -> DebugTrace:
        trace.rounds = list(self.observations)
        if self.state == ScrollState.CONVERGED:
            trace.scroll_rounds = self.round
            trace.stop_reason = STOP_REASON_STABLE
        return trace


async def converge_on_yesterday(
    host: FeedHost,
    clock: Clock,
    settings: Optional[Settings] = None,
    trace: Optional[DebugTrace] = None,
) -> DebugTrace:
    """
    滚动直到昨天的动态全部加载（或轮数耗尽）

    Args:
        host: 宿主环境（快照 + 滚动）
        clock: 计时器，滚动后的等待均通过它进行
        settings: 轮数与等待时间配置
        trace: 可选的调试信息对象，结果写入其中

    Returns:
        DebugTrace: 调试信息；收敛时带有 scroll_rounds 与 stop_reason
    """
    s = settings or default_settings
    trace = trace or DebugTrace()
    machine = ScrollConvergence(max_rounds=s.max_rounds, stable_rounds=s.stable_rounds)

    while not machine.done:
        round_no = machine.begin_round()
        await host.scroll_to_bottom()
        await clock.sleep(s.settle_delay)

        snapshot = await host.snapshot()
        state = machine.observe(snapshot.time_labels())
        obs = machine.observations[-1]
        logger.debug(
            f"滚动第 {round_no} 轮: 昨天 {obs.yesterday_count} 条, "
            f"2天前={obs.saw_two_days_ago}, 稳定 {obs.stable_count} 轮 -> {state.value}"
        )

    if machine.state == ScrollState.CONVERGED:
        logger.info(f"滚动收敛: 第 {machine.round} 轮, 昨天 {machine.last_count} 条")
    else:
        logger.info(f"滚动达到上限 {machine.max_rounds} 轮，使用当前已加载内容")

    # 稳定点之后的内容可能仍在懒加载
    await clock.sleep(s.final_settle_delay)
    return machine.apply_to(trace)
