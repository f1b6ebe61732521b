from decimal import Decimal

from playwright.sync_api import Page

from config.locators import CHECKOUT_OVERVIEW_LOCATORS
from config.pages import PATHS
from data.checkout_data import PRICE_TOLERANCE
from pages.base_page import BasePage
from assertions.cart_assert import CartAssert
from assertions.checkout_assert import CheckoutAssert
from utils.common_utils import parse_money, sum_money


class CheckoutOverviewPage(BasePage):
    """checkout-step-two：订单确认"""
    PATH = PATHS["checkout_overview"]

    def __init__(self, page: Page):
        super().__init__(page)
        self.checkout_overview_container = page.locator(CHECKOUT_OVERVIEW_LOCATORS["checkout_summary_container"])
        # 商品信息
        self.cart_items = page.locator(CHECKOUT_OVERVIEW_LOCATORS["cart_item"])
        self.cart_item_names = page.locator(CHECKOUT_OVERVIEW_LOCATORS["item_product_name"])
        self.cart_item_prices = page.locator(CHECKOUT_OVERVIEW_LOCATORS["item_product_price"])
        # 订单价格
        self.payment_information = page.locator(CHECKOUT_OVERVIEW_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_information = page.locator(CHECKOUT_OVERVIEW_LOCATORS["shipping_information"])  # 配送信息value
        self.subtotal_label = page.locator(CHECKOUT_OVERVIEW_LOCATORS["products_price"])  # 商品总价格
        self.tax_label = page.locator(CHECKOUT_OVERVIEW_LOCATORS["tax_price"])  # 税费
        self.total_label = page.locator(CHECKOUT_OVERVIEW_LOCATORS["order_price"])  # 订单价格
        # 操作步骤
        self.cancel_button = page.locator(CHECKOUT_OVERVIEW_LOCATORS["cancel_button"])  # 取消按钮
        self.finish_button = page.locator(CHECKOUT_OVERVIEW_LOCATORS["finish_button"])  # 完成按钮

    # ========== 页面行为 ==========
    def wait_for_page_load(self):
        self.wait_for_load()
        self.wait_visible(self.checkout_overview_container)

    def click_finish_button(self):
        self.click(self.finish_button)
        self.wait_url(PATHS["checkout_complete"])

    def click_cancel_button(self):
        self.click(self.cancel_button)
        self.wait_url(PATHS["inventory"])

    # ================= 数据获取 =================
    def get_cart_item_names(self) -> list[str]:
        return self.get_texts(self.cart_item_names)

    def get_cart_item_prices(self) -> list[str]:
        return self.get_texts(self.cart_item_prices)

    def get_cart_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def get_subtotal(self) -> str:
        return self.text(self.subtotal_label)

    def get_tax(self) -> str:
        return self.text(self.tax_label)

    def get_total(self) -> str:
        return self.text(self.total_label)

    def is_finish_button_enabled(self) -> bool:
        return self.is_enabled(self.finish_button)

    def is_on_checkout_overview_page(self) -> bool:
        return self.is_on_page()

    # ================= 手动计算 =================
    def calculate_total_from_items(self) -> Decimal:
        return sum_money(self.get_cart_item_prices())

    # ========== checkout-step-two 基本验证 ==========
    def verify_order_items(self, expected_items: list[str]):
        CartAssert.items_match(expected_items, self.get_cart_item_names())

    def verify_cart_item_count(self, expect_count: int):
        CartAssert.item_count(self.get_cart_item_count(), expect_count)

    def verify_payment_information_visible(self):
        self.wait_visible(self.payment_information)
        CheckoutAssert.not_empty(self.text(self.payment_information))

    def verify_shipping_information_visible(self):
        self.wait_visible(self.shipping_information)
        CheckoutAssert.not_empty(self.text(self.shipping_information))

    def verify_finish_button_enabled(self):
        self.wait_visible(self.finish_button)
        assert self.is_finish_button_enabled(), "Finish按钮不可用"

    def verify_total_calculation(self):
        """各商品价格之和 = 页面显示的 Item total（误差 < 0.01）"""
        subtotal = self.get_subtotal()
        CheckoutAssert.price_format(subtotal)
        CheckoutAssert.price_close(self.calculate_total_from_items(), parse_money(subtotal), PRICE_TOLERANCE)

    def verify_order_price(self):
        """Item total + Tax = Total"""
        tax, total = self.get_tax(), self.get_total()
        CheckoutAssert.price_format(tax)
        CheckoutAssert.price_format(total)
        CheckoutAssert.order_price(parse_money(self.get_subtotal()), parse_money(tax), parse_money(total),
                                   PRICE_TOLERANCE)
