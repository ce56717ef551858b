from decimal import Decimal


class CheckOutAssert:

    @staticmethod
    def tips_message(actual_msg: str, expect_msg: str):
        """提示文案只做包含判断"""
        assert expect_msg in actual_msg, f"预期提示信息：{expect_msg}，不存在于{actual_msg}"

    @staticmethod
    def error_displayed(displayed: bool):
        assert displayed, "收货人信息页错误提示未显示"

    @staticmethod
    def not_empty(column: str):
        assert column.strip() != "", f"{column}为空！"

    @staticmethod
    def order_items(actual: list, expect: list):
        """订单确认页商品 = 加购商品（不关心顺序）"""
        assert len(actual) == len(expect), f"结算页面商品数量{len(actual)} != 已加购商品数量{len(expect)}"
        for name in expect:
            assert name in actual, f"加购的商品{name}，在结算页面不存在：{actual}"

    @staticmethod
    def order_price(subtotal: Decimal, total: Decimal):
        """0 < 商品总价 < 订单总价（含税）"""
        assert subtotal > 0, f"商品总价必须大于 0：{subtotal}"
        assert total > subtotal, f"订单总价{total} 应大于商品总价{subtotal}"

    @staticmethod
    def order_price_sum(subtotal: Decimal, tax: Decimal, total: Decimal):
        expect = subtotal + tax
        assert total == expect, f"实际总金额{total}!=预期总金额{expect}"

    @staticmethod
    def price_equal(expect: Decimal, actual: Decimal):
        assert expect == actual, f"预期价格：{expect}!={actual}"
