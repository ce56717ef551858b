from decimal import Decimal

from playwright.sync_api import Page

from config.locators import PRODUCTS_LOCATORS
from config.pages import PATHS
from pages.base_page import BasePage
from utils.common_utils import parse_count, parse_money, to_product_id


class ProductsPage:
    """inventory.html：商品列表、加购/移除、排序、购物车角标"""

    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.inventory_list = PRODUCTS_LOCATORS["inventory_list"]  # 商品列表容器
        self.item_product = PRODUCTS_LOCATORS["item_product"]  # 单个商品
        self.item_product_name = PRODUCTS_LOCATORS["item_product_name"]  # 商品名称
        self.item_product_price = PRODUCTS_LOCATORS["item_product_price"]  # 商品价格
        self.sort_dropdown = PRODUCTS_LOCATORS["product_sort_type"]  # 排序下拉框
        self.cart_badge = PRODUCTS_LOCATORS["cart_badge"]  # 购物车角标
        self.cart_link = PRODUCTS_LOCATORS["cart_link"]  # 购物车icon

    # ================= 动态 locator =================
    @staticmethod
    def add_to_cart_button(product_name: str) -> str:
        return PRODUCTS_LOCATORS["add_to_cart_button"].format(product_id=to_product_id(product_name))

    @staticmethod
    def remove_button(product_name: str) -> str:
        return PRODUCTS_LOCATORS["remove_button"].format(product_id=to_product_id(product_name))

    # ================= 页面行为 =================
    def navigate(self):
        self.base.goto(PATHS["inventory"])

    def add_product_to_cart(self, product_name: str):
        self.base.click(self.add_to_cart_button(product_name))

    def remove_product_from_cart(self, product_name: str):
        self.base.click(self.remove_button(product_name))

    def click_product_title(self, product_name: str):
        """按商品名精确匹配点击标题，进入详情页"""
        titles = self.base.locator(self.item_product_name)
        for i in range(titles.count()):
            title = titles.nth(i)
            if (title.text_content() or "").strip() == product_name:
                title.click()
                return
        raise LookupError(f'Product "{product_name}" not found')

    def select_sort_option(self, option: str):
        """option：az / za / lohi / hilo"""
        self.base.select_option(self.sort_dropdown, option)

    def go_to_cart(self):
        self.base.click(self.cart_link)

    # ================= 数据获取 =================
    def get_cart_badge_count(self) -> int:
        # 购物车为空时角标不渲染
        if not self.base.is_visible(self.cart_badge):
            return 0
        return parse_count(self.base.get_text(self.cart_badge))

    def get_product_names(self) -> list[str]:
        return self.base.get_texts(self.item_product_name)

    def get_product_prices(self) -> list[Decimal]:
        return [parse_money(p) for p in self.base.get_texts(self.item_product_price)]

    def get_product_count(self) -> int:
        return self.base.count(self.item_product)

    def is_product_added(self, product_name: str) -> bool:
        """Remove 按钮可见 = 已加购"""
        return self.base.is_visible(self.remove_button(product_name))

    def is_inventory_displayed(self) -> bool:
        return self.base.is_visible(self.inventory_list)
