from playwright.sync_api import Page

from config.locators import CHECKOUT_COMPLETE_LOCATORS
from pages.base_page import BasePage


class CheckOutCompletePage:
    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.confirmation_header = CHECKOUT_COMPLETE_LOCATORS["complete_header"]  # 完成页面提示信息
        self.confirmation_message = CHECKOUT_COMPLETE_LOCATORS["complete_text"]
        self.back_home_button = CHECKOUT_COMPLETE_LOCATORS["back_home_button"]

    def get_confirmation_header(self) -> str:
        return self.base.get_text(self.confirmation_header)

    def get_confirmation_message(self) -> str:
        return self.base.get_text(self.confirmation_message)

    def is_order_complete(self) -> bool:
        return self.base.is_visible(self.confirmation_header) and self.base.is_visible(self.confirmation_message)

    def go_back_home(self):
        self.base.click(self.back_home_button)
