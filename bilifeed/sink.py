"""
导出目标

采集完成后先确认（确定：导出 / 取消：丢弃本次结果），再把 Markdown 写入输出目录。
"""
from pathlib import Path
from typing import Callable, Optional, Protocol, Union

from bilifeed.core.logging import logger


class DeliverySink(Protocol):
    def confirm(self, count: int) -> bool: ...

    def deliver(self, document: str, filename: str) -> Optional[Path]: ...


def confirm_message(count: int) -> str:
    return f"收集完成：{count} 条\n\n确定导出 Markdown？[y/N] "


class FileSink:
    """写入本地文件；assume_yes 为 False 时通过 prompt 询问"""

    def __init__(
        self,
        output_dir: Union[str, Path],
        *,
        assume_yes: bool = False,
        prompt: Callable[[str], str] = input,
    ):
        self.output_dir = Path(output_dir)
        self.assume_yes = assume_yes
        self._prompt = prompt

    def confirm(self, count: int) -> bool:
        if self.assume_yes:
            return True
        try:
            answer = self._prompt(confirm_message(count))
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes", "是")

    def deliver(self, document: str, filename: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / filename
        path.write_text(document, encoding="utf-8")
        logger.info(f"已导出: {path}")
        return path
