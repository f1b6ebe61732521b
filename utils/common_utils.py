import logging
import random
import re
import string
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterable

import allure

logger = logging.getLogger(__name__)


def parse_money(text: str) -> Decimal:
    """
        从 '$29.99'、'Item total: $55.97' 提取 Decimal('29.99')、Decimal('55.97')
        """
    match = re.search(r"\$\s*(\d+(?:\.\d+)?)", text)
    assert match, f"无法从文本中解析金额：{text}"
    return Decimal(match.group(1))


def sum_money(prices: Iterable[str]) -> Decimal:
    # 显式指定 sum 初始值="0"
    return sum((parse_money(p) for p in prices), Decimal("0"))


def within_tolerance(expect: Decimal, actual: Decimal, tolerance: Decimal) -> bool:
    return abs(expect - actual) < tolerance


@contextmanager
def log_step(step: str):
    """记录测试步骤：live log 带时间戳，Allure 报告中显示为 step"""
    logger.info("STEP: %s", step)
    with allure.step(step):
        yield


def random_string(length: int = 8) -> str:
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))
