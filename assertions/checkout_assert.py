from decimal import Decimal
import re

from utils.common_utils import within_tolerance


class CheckoutAssert:

    @staticmethod
    def tips_message(actual_msg, expect_msg: str):
        """收件人信息不完整，点击continue按钮"""
        assert actual_msg, f"未显示错误提示，期望：{expect_msg}"
        assert actual_msg == expect_msg, f"预期提示信息：{expect_msg}，实际提示信息：{actual_msg}"

    @staticmethod
    def not_empty(column: str):
        assert column.strip() != "", f"{column}为空！"

    @staticmethod
    def price_format(price: str):
        """只关心price格式，不关心具体 label 文案
           UI 改文案测试不炸"""
        assert re.match(r"^[A-Za-z ]+: \$\d+(\.\d{2})$", price), f"价格格式错误：{price}"

    @staticmethod
    def price_close(expect: Decimal, actual: Decimal, tolerance: Decimal):
        assert within_tolerance(expect, actual, tolerance), \
            f"预期价格：{expect}，实际价格：{actual}，差值超过{tolerance}"

    @staticmethod
    def order_price(item_price: Decimal, tax: Decimal, order_price: Decimal, tolerance: Decimal):
        """商品总价 + 税费 = 订单总价"""
        expect = item_price + tax
        assert within_tolerance(expect, order_price, tolerance), f"实际总金额{order_price}!=预期总金额{expect}"

    @staticmethod
    def form_values(actual, expect):
        assert actual == expect, f"收货人信息回显错误：{actual}!={expect}"
