import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from playwright.sync_api import Locator, Page, expect

from config.pages import BASE_URL
from config.settings import SCREENSHOTS_DIR, TIMEOUTS
from utils.lookup import Lookup, lookup_text
from utils.retry import retry_with_backoff

logger = logging.getLogger(__name__)


def url_pattern(path: str) -> re.Pattern:
    """url 片段 -> 匹配当前 url 的正则
    登录页的片段是 "/"，任何页面的 url 都包含它，只能整体匹配站点根地址"""
    if path == "/":
        return re.compile(re.escape(BASE_URL) + r"/?$")
    return re.compile(re.escape(path))


class BasePage:
    PATH = "/"  # 当前页面 url 片段，子类覆盖

    def __init__(self, page: Page):
        self.page = page

    # ========= 基础动作 =========
    def open(self, url: str):
        self.page.goto(url)

    def reload(self):
        self.page.reload()

    def click(self, locator: Locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def fill(self, locator: Locator, value: str):
        locator.fill(value)  # fill 会先清空原有内容

    def text(self, locator: Locator) -> str:
        return (locator.text_content() or "").strip()

    def get_texts(self, locator: Locator) -> list[str]:
        return [t.strip() for t in locator.all_text_contents()]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    # ========= 等待 =========
    def wait_visible(self, locator: Locator, timeout: Optional[float] = None):
        expect(locator).to_be_visible(timeout=timeout)  # 有一个严格模式规则：expect 只能作用在「唯一元素」上

    def wait_hidden(self, locator: Locator, timeout: Optional[float] = None):
        expect(locator).to_be_hidden(timeout=timeout)

    def wait_url(self, pattern: str, timeout: Optional[float] = None):
        expect(self.page).to_have_url(url_pattern(pattern), timeout=timeout)

    def wait_for_load(self):
        self.page.wait_for_load_state("networkidle")

    # ========= 查询（不抛异常） =========
    def get_current_url(self) -> str:
        return self.page.url

    def is_on_page(self) -> bool:
        return url_pattern(self.PATH).search(self.get_current_url()) is not None

    def is_visible(self, locator: Locator) -> bool:
        return locator.is_visible()

    def is_enabled(self, locator: Locator) -> bool:
        return locator.is_enabled()

    def lookup_text(self, locator: Locator, timeout: float = TIMEOUTS["short"]) -> Lookup:
        return lookup_text(locator, timeout)

    # ========= 辅助 =========
    def retry(self, action: Callable, **kwargs):
        return retry_with_backoff(action, **kwargs)

    def handle_flaky(self, locator: Locator, action: Callable[[Locator], None]):
        """不稳定元素：等可见后再操作，整体按退避策略重试"""
        def attempt():
            locator.wait_for(state="visible")
            action(locator)

        self.retry(attempt)

    def take_screenshot(self, name: str) -> Path:
        timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")
        path = Path(SCREENSHOTS_DIR) / self.__class__.__name__ / f"{name}-{timestamp}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=path, full_page=True)
        logger.info("📸 screenshot saved -> %s", path)
        return path
