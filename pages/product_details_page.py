from playwright.sync_api import Page

from config.locators import PRODUCT_DETAILS_LOCATORS
from pages.base_page import BasePage


class ProductDetailsPage:
    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.product_name = PRODUCT_DETAILS_LOCATORS["product_name"]
        self.product_desc = PRODUCT_DETAILS_LOCATORS["product_desc"]
        self.product_price = PRODUCT_DETAILS_LOCATORS["product_price"]
        self.add_to_cart_button = PRODUCT_DETAILS_LOCATORS["add_to_cart_button"]
        self.remove_button = PRODUCT_DETAILS_LOCATORS["remove_button"]
        self.back_button = PRODUCT_DETAILS_LOCATORS["back_button"]

    # ================= 页面行为 =================
    def add_to_cart(self):
        self.base.click(self.add_to_cart_button)

    def remove_from_cart(self):
        self.base.click(self.remove_button)

    def go_back_to_products(self):
        self.base.click(self.back_button)

    # ================= 数据获取 =================
    def get_product_name(self) -> str:
        return self.base.get_text(self.product_name)

    def get_product_description(self) -> str:
        return self.base.get_text(self.product_desc)

    def get_product_price(self) -> str:
        """原始价格文本，例如 '$29.99'"""
        return self.base.get_text(self.product_price)

    def is_add_to_cart_button_visible(self) -> bool:
        return self.base.is_visible(self.add_to_cart_button)

    def is_remove_button_visible(self) -> bool:
        return self.base.is_visible(self.remove_button)
