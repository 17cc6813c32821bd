"""
Playwright 浏览器宿主

打开关注动态页，提供 DOM 快照与滚动命令。
可选加载 storage_state 文件复用已登录的浏览器会话（本工具不处理登录本身）。
"""

from pathlib import Path
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Error as PlaywrightError, async_playwright

from bilifeed.core.config import Settings, settings as default_settings
from bilifeed.core.logging import logger
from bilifeed.errors import HostUnavailableError
from bilifeed.parser import FeedSnapshot


_SCROLL_TO_BOTTOM_JS = "window.scrollTo(0, document.body.scrollHeight)"


class PlaywrightHost:
    """基于 Chromium 页面的宿主，支持 async with"""

    scrollable = True

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self._playwright = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    # ------------------------------------------------------------------
    # 生命周期
    # ------------------------------------------------------------------

    async def startup(self) -> None:
        if self._page is not None:
            return

        s = self.settings
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=s.headless)

            context_kwargs = {
                "user_agent": s.user_agent,
                "viewport": {"width": s.viewport_width, "height": s.viewport_height},
            }
            if s.storage_state:
                state_path = Path(s.storage_state)
                if state_path.exists():
                    context_kwargs["storage_state"] = str(state_path)
                else:
                    logger.warning(f"storage_state 文件不存在，使用空白会话: {state_path}")

            self._context = await self._browser.new_context(**context_kwargs)
            self._page = await self._context.new_page()
            await self._page.goto(s.feed_url, wait_until="domcontentloaded", timeout=s.navigation_timeout_ms)
        except PlaywrightError as e:
            await self.shutdown()
            raise HostUnavailableError(f"无法打开动态页: {e}", details={"url": s.feed_url})

        logger.info(f"PlaywrightHost: 已打开 {s.feed_url}")

    async def shutdown(self) -> None:
        if self._context:
            try:
                await self._context.close()
            except PlaywrightError as e:
                logger.debug(f"关闭浏览器上下文失败: {e}")
        if self._browser:
            try:
                await self._browser.close()
            except PlaywrightError as e:
                logger.debug(f"关闭浏览器失败: {e}")
        if self._playwright:
            await self._playwright.stop()

        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None

    async def __aenter__(self) -> "PlaywrightHost":
        await self.startup()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.shutdown()

    # ------------------------------------------------------------------
    # FeedHost
    # ------------------------------------------------------------------

    def _require_page(self) -> Page:
        if self._page is None:
            raise HostUnavailableError("浏览器尚未就绪")
        return self._page

    async def snapshot(self) -> FeedSnapshot:
        page = self._require_page()
        try:
            html = await page.content()
        except PlaywrightError as e:
            raise HostUnavailableError(f"读取页面失败: {e}")
        return FeedSnapshot(html)

    async def scroll_to_bottom(self) -> None:
        page = self._require_page()
        try:
            await page.evaluate(_SCROLL_TO_BOTTOM_JS)
        except PlaywrightError as e:
            raise HostUnavailableError(f"滚动页面失败: {e}")
