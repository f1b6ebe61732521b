from typing import Optional

from playwright.sync_api import Page

from config.locators import CHECKOUT_INFO_LOCATORS
from config.pages import PATHS
from data.models import CheckoutInfo
from pages.base_page import BasePage
from assertions.checkout_assert import CheckoutAssert
from utils.lookup import Lookup


class CheckoutPage(BasePage):
    """checkout-step-one：收货人信息"""
    PATH = PATHS["checkout_info"]

    def __init__(self, page: Page):
        super().__init__(page)
        self.checkout_container = page.locator(CHECKOUT_INFO_LOCATORS["checkout_info_container"])
        self.first_name_input = page.locator(CHECKOUT_INFO_LOCATORS["firstName_input"])  # firstName输入框
        self.last_name_input = page.locator(CHECKOUT_INFO_LOCATORS["lastName_input"])  # lastName输入框
        self.postal_code_input = page.locator(CHECKOUT_INFO_LOCATORS["postalCode_input"])  # postalCode输入框
        self.error_message = page.locator(CHECKOUT_INFO_LOCATORS["container_error_msg"])  # 收货人未填写点击下一步错误提示文案
        self.cancel_button = page.locator(CHECKOUT_INFO_LOCATORS["cancel_button"])  # 取消按钮
        self.continue_button = page.locator(CHECKOUT_INFO_LOCATORS["continue_button"])  # 继续按钮

    # ========== 页面行为 ==========
    def wait_for_page_load(self):
        self.wait_for_load()
        self.wait_visible(self.checkout_container)

    def fill_first_name(self, first_name: str):
        self.fill(self.first_name_input, first_name)

    def fill_last_name(self, last_name: str):
        self.fill(self.last_name_input, last_name)

    def fill_postal_code(self, postal_code: str):
        self.fill(self.postal_code_input, postal_code)

    def fill_checkout_information(self, info: CheckoutInfo):
        self.fill_first_name(info.first_name)
        self.fill_last_name(info.last_name)
        self.fill_postal_code(info.postal_code)

    def click_continue_button(self):
        """点击continue按钮；信息不完整时停留在当前页并显示错误"""
        self.click(self.continue_button)

    def click_cancel_button(self):
        self.click(self.cancel_button)
        self.wait_url(PATHS["cart"])

    def complete_checkout_information(self, info: CheckoutInfo):
        self.fill_checkout_information(info)
        self.click_continue_button()
        self.wait_url(PATHS["checkout_overview"])

    # ================= 数据获取 =================
    def lookup_error_message(self) -> Lookup:
        return self.lookup_text(self.error_message)

    def get_error_message(self) -> Optional[str]:
        return self.lookup_error_message().value

    def is_error_message_visible(self) -> bool:
        return self.is_visible(self.error_message)

    def is_continue_button_enabled(self) -> bool:
        return self.is_enabled(self.continue_button)

    def get_form_field_values(self) -> CheckoutInfo:
        return CheckoutInfo(first_name=self.first_name_input.input_value(),
                            last_name=self.last_name_input.input_value(),
                            postal_code=self.postal_code_input.input_value())

    def is_on_checkout_page(self) -> bool:
        return self.is_on_page()

    # ========== checkout-step-one 基本验证 ==========
    def verify_form_fields_visible(self):
        for element in (self.first_name_input, self.last_name_input, self.postal_code_input,
                        self.continue_button, self.cancel_button):
            self.wait_visible(element)

    def verify_form_field_values(self, expect_info: CheckoutInfo):
        CheckoutAssert.form_values(self.get_form_field_values(), expect_info)

    def verify_error_message(self, expect_error_msg: str):
        CheckoutAssert.tips_message(self.get_error_message(), expect_error_msg)
