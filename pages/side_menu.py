from playwright.sync_api import Page

from config.locators import MENU_LOCATORS
from pages.base_page import BasePage


class SideMenu:
    """左上角汉堡菜单，目前只用到 logout"""

    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.burger_button = MENU_LOCATORS["burger_button"]
        self.logout_link = MENU_LOCATORS["logout_link"]

    def open(self):
        self.base.click(self.burger_button)
        # 菜单有展开动画，webkit 下不等可见直接点会失败
        self.base.locator(self.logout_link).wait_for(state="visible")

    def logout(self):
        self.open()
        self.base.click(self.logout_link)
