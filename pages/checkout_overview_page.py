from decimal import Decimal

from playwright.sync_api import Page

from config.locators import CHECKOUT_OVERVIEW_LOCATORS
from pages.base_page import BasePage
from utils.common_utils import parse_money, parse_money_or_zero


class CheckOutOverviewPage:
    """checkout-step-two.html：订单确认"""

    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        #  商品信息
        self.item_names = CHECKOUT_OVERVIEW_LOCATORS["item_product_name"]
        self.item_prices = CHECKOUT_OVERVIEW_LOCATORS["item_product_price"]
        # 订单价格
        self.subtotal_label = CHECKOUT_OVERVIEW_LOCATORS["subtotal_label"]  # 商品总价格
        self.tax_label = CHECKOUT_OVERVIEW_LOCATORS["tax_label"]  # 税
        self.total_label = CHECKOUT_OVERVIEW_LOCATORS["total_label"]  # 订单价格
        # 操作步骤
        self.finish_button = CHECKOUT_OVERVIEW_LOCATORS["finish_button"]  # 完成按钮
        self.cancel_button = CHECKOUT_OVERVIEW_LOCATORS["cancel_button"]  # 取消按钮

    # ========== 页面行为 ==========
    def click_finish(self):
        self.base.click(self.finish_button)

    def click_cancel(self):
        self.base.click(self.cancel_button)

    # ================= 数据获取 =================
    def get_item_names(self) -> list[str]:
        return self.base.get_texts(self.item_names)

    def get_item_prices(self) -> list[Decimal]:
        return [parse_money(p) for p in self.base.get_texts(self.item_prices)]

    def get_subtotal(self) -> Decimal:
        # 'Item total: $39.98'
        return parse_money_or_zero(self.base.get_text(self.subtotal_label))

    def get_tax(self) -> Decimal:
        return parse_money_or_zero(self.base.get_text(self.tax_label))

    def get_total(self) -> Decimal:
        return parse_money_or_zero(self.base.get_text(self.total_label))
