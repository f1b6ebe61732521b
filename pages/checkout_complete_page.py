from playwright.sync_api import Page

from config.locators import CHECKOUT_COMPLETE_LOCATORS
from config.pages import PATHS
from data.checkout_data import SUCCESS_MESSAGES
from pages.base_page import BasePage
from assertions.complete_assert import CompleteAssert


class CheckoutCompletePage(BasePage):
    PATH = PATHS["checkout_complete"]

    def __init__(self, page: Page):
        super().__init__(page)
        self.checkout_complete_container = page.locator(CHECKOUT_COMPLETE_LOCATORS["checkout_complete_container"])
        self.complete_header = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_header"])
        self.complete_text = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_text"])
        self.pony_express_image = page.locator(CHECKOUT_COMPLETE_LOCATORS["pony_express"])
        self.back_home_button = page.locator(CHECKOUT_COMPLETE_LOCATORS["back_home_button"])

    # ========== 页面行为 ==========
    def wait_for_page_load(self):
        self.wait_for_load()
        self.wait_visible(self.checkout_complete_container)
        self.wait_visible(self.complete_header)
        self.wait_visible(self.complete_text)

    def click_back_home_button(self):
        self.click(self.back_home_button)
        self.wait_url(PATHS["inventory"])

    def complete_order_and_return_to_inventory(self) -> bool:
        """完成页校验通过才返回商品列表"""
        if not self.verify_checkout_completion():
            return False
        self.click_back_home_button()
        return True

    # ================= 数据获取 =================
    def get_complete_header_text(self) -> str:
        return self.text(self.complete_header)

    def get_complete_text(self) -> str:
        return self.text(self.complete_text)

    def is_back_home_button_enabled(self) -> bool:
        return self.is_enabled(self.back_home_button)

    def is_on_checkout_complete_page(self) -> bool:
        return self.is_on_page()

    # ========== 完成页校验（返回 bool） ==========
    def verify_thank_you_message(self) -> bool:
        return self.get_complete_header_text() == SUCCESS_MESSAGES["order_complete"]

    def verify_order_dispatch_message(self) -> bool:
        text = self.get_complete_text()
        return SUCCESS_MESSAGES["order_dispatched"] in text and SUCCESS_MESSAGES["pony_arrival"] in text

    def verify_checkout_completion(self) -> bool:
        return self.verify_thank_you_message() and self.verify_order_dispatch_message()

    def verify_completion_page_elements(self) -> bool:
        elements = (self.checkout_complete_container, self.back_home_button, self.complete_header,
                    self.complete_text, self.pony_express_image)
        return all(self.is_visible(e) for e in elements)

    # ========== 完成页断言 ==========
    def assert_checkout_completion(self):
        CompleteAssert.header(self.get_complete_header_text(), SUCCESS_MESSAGES["order_complete"])
        CompleteAssert.body_contains(self.get_complete_text(),
                                     [SUCCESS_MESSAGES["order_dispatched"], SUCCESS_MESSAGES["pony_arrival"]])
