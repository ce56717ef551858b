from playwright.sync_api import Page

from config.locators import CHECKOUT_INFO_LOCATORS
from pages.base_page import BasePage


class CheckOutInfoPage:
    """checkout-step-one.html：收货人信息表单"""

    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.firstName_input = CHECKOUT_INFO_LOCATORS["firstName_input"]  # firstName输入框
        self.lastName_input = CHECKOUT_INFO_LOCATORS["lastName_input"]  # lastName输入框
        self.postalCode_input = CHECKOUT_INFO_LOCATORS["postalCode_input"]  # postalCode输入框
        self.continue_button = CHECKOUT_INFO_LOCATORS["continue_button"]  # 继续按钮
        self.cancel_button = CHECKOUT_INFO_LOCATORS["cancel_button"]  # 取消按钮
        self.error_message = CHECKOUT_INFO_LOCATORS["error_msg"]  # 收货人未填写点击下一步错误提示文案

    # ========== 页面行为 ==========
    def fill_checkout_info(self, first_name: str, last_name: str, postal_code: str):
        self.base.fill(self.firstName_input, first_name)
        self.base.fill(self.lastName_input, last_name)
        self.base.fill(self.postalCode_input, postal_code)

    def click_continue(self):
        self.base.click(self.continue_button)

    def click_cancel(self):
        self.base.click(self.cancel_button)

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.base.get_text(self.error_message)

    def is_error_displayed(self) -> bool:
        return self.base.is_visible(self.error_message)

    def is_form_displayed(self) -> bool:
        return all(self.base.is_visible(s) for s in (self.firstName_input, self.lastName_input, self.postalCode_input))
