from playwright.sync_api import Page

from config.locators import LOGIN_LOCATORS
from config.pages import PATHS
from pages.base_page import BasePage


class LoginPage:
    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.username_input = LOGIN_LOCATORS["username_input"]  # 用户名输入框
        self.password_input = LOGIN_LOCATORS["password_input"]  # 密码输入框
        self.login_button = LOGIN_LOCATORS["login_button"]  # 登录按钮
        self.error_message = LOGIN_LOCATORS["error_msg"]  # 登录校验错误提示信息

    # ================= 页面行为 =================
    def navigate(self):
        self.base.goto(PATHS["login"])

    def login(self, username: str, password: str):
        self.base.fill(self.username_input, username)
        self.base.fill(self.password_input, password)
        self.base.click(self.login_button)

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.base.get_text(self.error_message)

    def is_error_displayed(self) -> bool:
        return self.base.is_visible(self.error_message)
