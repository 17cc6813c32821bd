"""
Configuration management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal

from bilifeed.constants import FEED_URL


class Settings(BaseSettings):
    """Application settings."""
    model_config = SettingsConfigDict(
        env_prefix="BILIFEED_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # 关注动态页
    feed_url: str = FEED_URL

    # 滚动收敛参数
    max_rounds: int = 60  # 滚动轮数上限，超过即静默结束
    settle_delay: float = 1.5  # 每轮滚动后的等待时间（秒）
    final_settle_delay: float = 2.0  # 收敛后的最终等待时间（秒）
    stable_rounds: int = 3  # 昨天数量连续稳定的轮数

    # 导出
    output_dir: str = "./exports"

    # 浏览器
    headless: bool = True
    storage_state: Optional[str] = None  # Playwright storage_state 文件，用于复用已登录的会话
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/126.0 Safari/537.36"
    )
    viewport_width: int = 1280
    viewport_height: int = 900
    navigation_timeout_ms: int = 30000

    # 日志配置
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"


settings = Settings()


def validate_settings(s: Settings = settings) -> None:
    """基础配置校验"""
    if s.max_rounds < 1:
        raise RuntimeError("BILIFEED_MAX_ROUNDS must be >= 1")
    if s.stable_rounds < 1:
        raise RuntimeError("BILIFEED_STABLE_ROUNDS must be >= 1")
    if s.settle_delay < 0 or s.final_settle_delay < 0:
        raise RuntimeError("Settle delays must not be negative")
    if not s.feed_url.startswith(("http://", "https://")):
        raise RuntimeError(f"Invalid BILIFEED_FEED_URL: {s.feed_url}")

    return None
