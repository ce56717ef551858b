class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def product_added(product_name: str, actual: bool, expect: bool = True):
        """Remove 按钮可见 = 已加购"""
        state = "已加购" if expect else "未加购"
        assert actual == expect, f"商品 {product_name} 预期为{state}状态，实际相反"

    @staticmethod
    def cart_item_count(cart_items: list, expect: int):
        assert len(cart_items) == expect, f"购物车页面商品数量{len(cart_items)} != 预期数量{expect}：{cart_items}"

    @staticmethod
    def contains(cart_items: list, product_name: str):
        assert product_name in cart_items, f"商品 {product_name} 不在购物车页面：{cart_items}"

    @staticmethod
    def not_contains(cart_items: list, product_name: str):
        assert product_name not in cart_items, f"商品 {product_name} 已删除，但仍在购物车页面：{cart_items}"

    @staticmethod
    def is_empty(empty: bool):
        assert empty, "购物车预期为空"
