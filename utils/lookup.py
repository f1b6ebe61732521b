"""可选元素查询结果

错误提示、购物车角标这类元素"不存在"是合法结果，用例需要能断言它
只有等待超时才算"确认不存在"；页面关闭、context 断开等其他 playwright 异常照常抛出，
不能被当成"不存在"吞掉
"""
from dataclasses import dataclass
from typing import Optional

from playwright.sync_api import Locator, TimeoutError as PlaywrightTimeoutError


@dataclass(frozen=True)
class Lookup:
    present: bool
    value: Optional[str] = None

    @classmethod
    def found(cls, value: str) -> "Lookup":
        return cls(present=True, value=value)

    @classmethod
    def absent(cls) -> "Lookup":
        return cls(present=False)

    def __bool__(self) -> bool:
        return self.present


def lookup_text(locator: Locator, timeout: float) -> Lookup:
    """等待元素可见后读取文本；超时返回 Lookup.absent()"""
    try:
        locator.wait_for(state="visible", timeout=timeout)
    except PlaywrightTimeoutError:
        return Lookup.absent()
    return Lookup.found((locator.text_content() or "").strip())
