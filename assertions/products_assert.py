from decimal import Decimal


class ProductsAssert:

    @staticmethod
    def sort_asc(values: list):
        assert values, "商品信息list为空"
        assert values == sorted(values), f"字段名称-{[values[0]]}未正序排列：{values}"

    @staticmethod
    def sort_desc(values: list):
        assert values, "商品信息list为空"
        assert values == sorted(values, reverse=True), f"字段名称-{[values[0]]}未倒序排列：{values}"

    @staticmethod
    def same_items(before: list, after: list):
        """排序只改变顺序：排序前后是同一批商品"""
        assert sorted(before) == sorted(after), f"排序前后商品不一致：{before} -> {after}"

    @staticmethod
    def prices_positive(prices: list[Decimal]):
        for price in prices:
            assert isinstance(price, Decimal), f"价格不是 Decimal: {price}"
            assert price > 0, f"价格必须大于 0: {price}"

    @staticmethod
    def product_name(actual: str, expect: str):
        assert actual == expect, f"详情页商品名称：{actual}!={expect}"
