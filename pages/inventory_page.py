import logging
from decimal import Decimal

from playwright.sync_api import Page

from config.locators import INVENTORY_LOCATORS
from config.pages import PATHS
from config.settings import TIMEOUTS
from data.inventory_data import CATALOG_ITEMS
from pages.base_page import BasePage
from assertions.inventory_assert import InventoryAssert
from utils.common_utils import parse_money

logger = logging.getLogger(__name__)


class UnknownItemError(ValueError):
    """加购了站点不存在的商品名称"""


def item_slug(name: str) -> str:
    """'Sauce Labs Bolt T-Shirt' -> 'sauce-labs-bolt-t-shirt'，与 data-test 属性一致"""
    return name.lower().replace(" ", "-")


class InventoryPage(BasePage):
    PATH = PATHS["inventory"]

    def __init__(self, page: Page):
        super().__init__(page)
        self.inventory_container = page.locator(INVENTORY_LOCATORS["inventory_container"])
        # 商品列表
        self.item_product = page.locator(INVENTORY_LOCATORS["item_product"])

        # 商品明细
        self.item_product_name = page.locator(INVENTORY_LOCATORS["item_product_name"])
        self.item_product_price = page.locator(INVENTORY_LOCATORS["item_product_price"])
        self.item_product_desc = page.locator(INVENTORY_LOCATORS["item_product_desc"])

        # 购物车
        self.cart_button = page.locator(INVENTORY_LOCATORS["shopping_cart_link"])  # 购物车icon
        self.cart_badge = page.locator(INVENTORY_LOCATORS["shopping_cart_badge"])  # 购物车角标

        # 排序下拉框、菜单
        self.product_sort_type = page.locator(INVENTORY_LOCATORS["product_sort_type"])
        self.menu_button = page.locator(INVENTORY_LOCATORS["menu_button"])
        self.logout_link = page.locator(INVENTORY_LOCATORS["logout_link"])

    # ================= 页面行为 =================
    def open_inventory(self, inventory_url: str):
        self.open(inventory_url)
        self.wait_for_page_load()

    def wait_for_page_load(self):
        self.wait_for_load()
        self.wait_visible(self.inventory_container)
        self.wait_visible(self.cart_button)

    def add_to_cart_button(self, name: str):
        return self.page.locator(INVENTORY_LOCATORS["add_to_cart_button"].format(slug=item_slug(name)))

    def add_item_to_cart(self, name: str):
        self.add_items_to_cart([name])

    def add_items_to_cart(self, names: list[str]):
        """按名称依次加购；名称全部校验通过后才开始点击"""
        unknown = [n for n in names if n not in CATALOG_ITEMS]
        if unknown:
            raise UnknownItemError(f"Unknown item: {', '.join(unknown)}")
        for name in names:
            logger.info("加购商品：%s", name)
            self.click(self.add_to_cart_button(name))

    def click_cart_button(self):
        self.click(self.cart_button)

    def go_to_cart(self):
        self.click_cart_button()
        self.wait_url(PATHS["cart"])

    def sort_by(self, label: str):
        self.product_sort_type.select_option(label=label)

    def logout(self):
        self.click(self.menu_button)
        # 侧边菜单有展开动画，退出链接偶尔点不到
        self.handle_flaky(self.logout_link, lambda link: link.click())
        self.wait_url(PATHS["login"])

    # ================= 数据获取 =================
    def get_cart_item_count(self) -> int:
        """购物车角标数字；角标不存在或不是数字时视为0"""
        if self.get_count(self.cart_badge) == 0:
            return 0
        badge = self.lookup_text(self.cart_badge, timeout=TIMEOUTS["short"])  # 角标可能刚好被移除
        try:
            return int(badge.value) if badge else 0
        except ValueError:
            return 0

    def is_cart_badge_visible(self) -> bool:
        return self.is_visible(self.cart_badge)

    def is_on_inventory_page(self) -> bool:
        return self.is_on_page()

    def get_product_count(self) -> int:
        return self.get_count(self.item_product)

    def get_product_names(self) -> list[str]:
        return self.get_texts(self.item_product_name)

    def get_product_description(self) -> list[str]:
        return self.get_texts(self.item_product_desc)

    def get_product_prices(self) -> list[str]:
        return self.get_texts(self.item_product_price)

    def get_product_prices_as_number(self) -> list[Decimal]:
        return [parse_money(p) for p in self.get_product_prices()]

    # ========== 基础校验 ==========
    def verify_cart_item_count(self, expect_count: int):
        # 角标在点击后异步刷新，短间隔重试
        self.retry(lambda: InventoryAssert.cart_badge_count(self.get_cart_item_count(), expect_count),
                   base_delay=0.2)

    def verify_base_info(self, expect_count: int):
        InventoryAssert.product_count(self.get_product_count(), expect_count)  # 商品数量一致
        InventoryAssert.column_not_empty(self.get_product_names(), "名称")
        InventoryAssert.names_in_catalog(self.get_product_names(), CATALOG_ITEMS)
        InventoryAssert.column_not_empty(self.get_product_description(), "描述")
        InventoryAssert.product_price_format(self.get_product_prices())  # 商品价格格式
        InventoryAssert.product_price_positive(self.get_product_prices_as_number())

    def verify_name_asc(self):
        InventoryAssert.sorted_by(self.get_product_names(), "名称")

    def verify_name_desc(self):
        InventoryAssert.sorted_by(self.get_product_names(), "名称", reverse=True)

    def verify_price_asc(self):
        InventoryAssert.sorted_by(self.get_product_prices_as_number(), "价格")

    def verify_price_desc(self):
        InventoryAssert.sorted_by(self.get_product_prices_as_number(), "价格", reverse=True)
