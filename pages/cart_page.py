from playwright.sync_api import Page

from config.locators import CART_LOCATORS
from config.pages import PATHS
from pages.base_page import BasePage
from utils.common_utils import parse_count, xpath_literal


class CartPage:
    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.cart_items = CART_LOCATORS["cart_item"]  # 购物车商品行
        self.cart_item_name = CART_LOCATORS["cart_item_name"]  # 商品名称
        self.cart_badge = CART_LOCATORS["cart_badge"]  # 购物车角标
        self.continue_shopping_button = CART_LOCATORS["continue"]  # continue-shopping按钮
        self.checkout_button = CART_LOCATORS["checkout_button"]  # 结算按钮

    # ================= 动态 locator =================
    @staticmethod
    def remove_button(product_name: str) -> str:
        # 购物车页 remove 按钮 id 无法从商品名推出来：名称节点 -> 所在行 -> 行内 remove 按钮
        return CART_LOCATORS["remove_by_name"].format(name=xpath_literal(product_name))

    @staticmethod
    def cart_item(product_name: str) -> str:
        return CART_LOCATORS["cart_item_by_name"].format(name=xpath_literal(product_name))

    # ================= 页面行为 =================
    def navigate_to_cart(self):
        self.base.goto(PATHS["cart"])

    def remove_item(self, product_name: str):
        self.base.click(self.remove_button(product_name))

    def continue_shopping(self):
        self.base.click(self.continue_shopping_button)

    def proceed_to_checkout(self):
        self.base.click(self.checkout_button)

    # ================= 数据获取 =================
    def get_cart_item_names(self) -> list[str]:
        return self.base.get_texts(self.cart_item_name)

    def is_item_in_cart(self, product_name: str) -> bool:
        return self.base.is_visible(self.cart_item(product_name))

    def get_cart_item_count(self) -> int:
        """角标数字，角标不显示时为 0"""
        if not self.base.is_visible(self.cart_badge):
            return 0
        return parse_count(self.base.get_text(self.cart_badge))

    def get_cart_item_element_count(self) -> int:
        return self.base.count(self.cart_items)

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_element_count() == 0
