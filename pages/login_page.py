from typing import Optional

from playwright.sync_api import Page

from config.locators import LOGIN_LOCATORS
from config.pages import PATHS
from pages.base_page import BasePage
from assertions.login_assert import LoginAssert
from utils.lookup import Lookup


class LoginPage(BasePage):
    PATH = PATHS["login"]

    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息
        self.login_logo = page.locator(LOGIN_LOCATORS["login_logo"])
        self.bot_image = page.locator(LOGIN_LOCATORS["bot_image"])

    # ================= 页面行为 =================
    def open_login(self, login_url: str):
        self.open(login_url)
        self.wait_for_page_load()

    def wait_for_page_load(self):
        self.wait_for_load()
        self.wait_visible(self.login_logo)
        self.wait_visible(self.bot_image)

    def reload_page(self):
        self.reload()
        self.wait_for_page_load()

    def fill_username(self, username: str):
        self.fill(self.username_input, username)

    def fill_password(self, password: str):
        self.fill(self.password_input, password)

    def click_login(self):
        self.click(self.login_button)

    def login(self, username: str, password: str):
        self.fill_username(username)
        self.fill_password(password)
        self.click_login()

    def wait_for_successful_login(self, timeout: Optional[float] = None):
        """等待跳转到 inventory 页；timeout 为空时使用 context 默认超时"""
        self.wait_url(PATHS["inventory"], timeout=timeout)

    # ================= 数据获取 =================
    def is_logged_in(self) -> bool:
        return PATHS["inventory"] in self.get_current_url()

    def lookup_error_message(self) -> Lookup:
        return self.lookup_text(self.error_message)

    def get_error_message(self) -> Optional[str]:
        """错误提示不存在时返回 None"""
        return self.lookup_error_message().value

    def is_error_message_visible(self) -> bool:
        return self.is_visible(self.error_message)

    def is_login_button_enabled(self) -> bool:
        return self.is_enabled(self.login_button)

    def get_field_values(self) -> tuple[str, str]:
        return self.username_input.input_value(), self.password_input.input_value()

    # ========== 登录校验 ==========
    def verify_login_success(self, pattern: str, timeout: Optional[float] = None):
        self.wait_url(pattern, timeout=timeout)

    def verify_login_fail(self, expect_msg: str):
        LoginAssert.error_message(self.get_error_message(), expect_msg)
        LoginAssert.still_on_login(self.get_current_url(), PATHS["inventory"])

    def verify_page_elements(self):
        for element in (self.login_logo, self.bot_image, self.username_input, self.password_input,
                        self.login_button):
            self.wait_visible(element)

    def verify_field_values(self, username: str, password: str):
        actual_username, actual_password = self.get_field_values()
        LoginAssert.field_value(actual_username, username, "username")
        LoginAssert.field_value(actual_password, password, "password")
