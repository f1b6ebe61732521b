import re
from decimal import Decimal

PRICE_PATTERN = re.compile(r"^\$\d+\.\d{2}$")


class InventoryAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def product_count(actual_count: int, expect_count: int):
        assert actual_count == expect_count, f"商品列表数量：{actual_count}，期望：{expect_count}"

    @staticmethod
    def column_not_empty(values: list[str], column: str):
        assert values, f"商品{column}列为空"
        blank = [i for i, v in enumerate(values) if not v.strip()]
        assert not blank, f"第{blank}个商品{column}为空"

    @staticmethod
    def names_in_catalog(names: list[str], catalog: list[str]):
        unknown = sorted(set(names) - set(catalog))
        assert not unknown, f"商品列表出现未知商品：{unknown}"

    @staticmethod
    def product_price_format(prices: list[str]):
        """'$29.99' 这种格式，两位小数"""
        bad = [p for p in prices if not PRICE_PATTERN.match(p)]
        assert prices and not bad, f"商品价格格式错误：{bad or prices}"

    @staticmethod
    def product_price_positive(prices: list[Decimal]):
        bad = [p for p in prices if p <= 0]
        assert not bad, f"商品价格必须大于0：{bad}"

    @staticmethod
    def sorted_by(values: list, field: str, reverse: bool = False):
        order = "倒序" if reverse else "正序"
        assert values == sorted(values, reverse=reverse), f"商品{field}未按{order}排列：{values}"
