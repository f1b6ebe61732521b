import logging
from decimal import Decimal

from playwright.sync_api import Page

from config.locators import CART_LOCATORS
from config.pages import PATHS
from data.models import LineItem
from pages.base_page import BasePage
from assertions.cart_assert import CartAssert
from utils.common_utils import parse_money, sum_money

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    PATH = PATHS["cart"]

    def __init__(self, page: Page):
        super().__init__(page)
        self.cart_container = page.locator(CART_LOCATORS["cart_container"])
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])  # 购物车商品行
        self.cart_item_names = page.locator(CART_LOCATORS["item_product_name"])
        self.cart_item_prices = page.locator(CART_LOCATORS["item_product_price"])
        self.remove_buttons = page.locator(CART_LOCATORS["remove_button"])
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮
        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮

    # ================= 页面行为 =================
    def wait_for_page_load(self):
        self.wait_for_load()
        self.wait_visible(self.cart_container)

    def click_checkout_button(self):
        self.click(self.checkout_button)

    def proceed_to_checkout(self):
        self.click_checkout_button()
        self.wait_url(PATHS["checkout_info"])

    def click_continue_shopping(self):
        self.click(self.continue_shopping_button)
        self.wait_url(PATHS["inventory"])

    def remove_item_from_cart(self, name: str) -> bool:
        """按名称删除商品；购物车中没有该商品时什么也不做，返回 False"""
        for i in range(self.get_count(self.cart_items)):
            row = self.cart_items.nth(i)
            if self.text(row.locator(CART_LOCATORS["item_product_name"])) == name:
                self.click(row.locator(CART_LOCATORS["remove_button"]))
                logger.info("购物车删除商品：%s", name)
                return True
        logger.info("购物车中没有商品：%s，跳过删除", name)
        return False

    # ================= 数据获取 =================
    def get_cart_item_names(self) -> list[str]:
        return self.get_texts(self.cart_item_names)

    def get_cart_item_prices(self) -> list[str]:
        return self.get_texts(self.cart_item_prices)

    def get_cart_items(self) -> list[LineItem]:
        """ 购物车页面商品信息list"""
        return [LineItem(name, parse_money(price))
                for name, price in zip(self.get_cart_item_names(), self.get_cart_item_prices())]

    def get_cart_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def get_total_price(self) -> Decimal:
        return sum_money(self.get_cart_item_prices())

    def is_checkout_button_enabled(self) -> bool:
        return self.is_enabled(self.checkout_button)

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def is_on_cart_page(self) -> bool:
        return self.is_on_page()

    # ================= 基础验证 =================
    def verify_cart_items(self, expected_items: list[str]):
        CartAssert.items_match(expected_items, self.get_cart_item_names())

    def verify_cart_item_count(self, expect_count: int):
        CartAssert.item_count(self.get_cart_item_count(), expect_count)
