"""通用重试：有界次数 + 指数退避

只用于包装偶发不稳定的页面交互，用例层不做重试
"""
import logging
import time
from typing import Callable, Tuple, Type, TypeVar

from playwright.sync_api import Error as PlaywrightError

from config.settings import RETRY

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE = (PlaywrightError, AssertionError)


def retry_with_backoff(action: Callable[[], T],
                       max_attempts: int = RETRY["max_attempts"],
                       base_delay: float = RETRY["base_delay"],
                       exceptions: Tuple[Type[BaseException], ...] = RETRYABLE,
                       sleep: Callable[[float], None] = time.sleep) -> T:
    """
    执行 action，失败后按 base_delay * 2^(n-1) 秒等待再重试
    :param action: 无参可调用对象
    :param max_attempts: 最多执行次数（包含第一次）
    :param base_delay: 第一次重试前的等待秒数，之后每次翻倍
    :param exceptions: 只有这些异常会触发重试，其余异常直接抛出
    :return: action 的返回值；次数用尽后抛出最后一次的异常
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts 必须 >= 1：{max_attempts}")

    for attempt in range(1, max_attempts + 1):
        try:
            return action()
        except exceptions as e:
            if attempt == max_attempts:
                logger.error("第%s次执行失败，重试次数已用尽：%s", attempt, e)
                raise
            delay = base_delay * 2 ** (attempt - 1)
            logger.warning("第%s次执行失败，%.1fs后重试：%s", attempt, delay, e)
            sleep(delay)
