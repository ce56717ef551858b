"""字符串处理：金额解析、商品 id 生成、xpath 字面量"""
import re
from decimal import Decimal

_MONEY = re.compile(r"\$(\d+(?:\.\d+)?)")


def parse_money(text: str) -> Decimal:
    """从 'Item total: $39.98' 提取 Decimal('39.98')"""
    match = _MONEY.search(text)
    assert match, f"无法从文本中解析金额：{text}"
    return Decimal(match.group(1))


def parse_money_or_zero(text: str) -> Decimal:
    """解析不到金额时返回 0（订单汇总标签还没渲染出金额时）"""
    match = _MONEY.search(text or "")
    return Decimal(match.group(1)) if match else Decimal("0")


def parse_count(text: str) -> int:
    """购物车角标文字 -> int，非数字按 0 处理"""
    try:
        return int((text or "").strip())
    except ValueError:
        return 0


def to_product_id(product_name: str) -> str:
    """
    商品名 -> data-test 属性里用的商品 id，规则必须与站点一致：
    'Sauce Labs Bolt T-Shirt' -> 'sauce-labs-bolt-t-shirt'
    'Test.allTheThings() T-Shirt (Red)' -> 'testallthethings-t-shirt-red'
    """
    product_id = re.sub(r"\s+", "-", product_name.lower())
    product_id = re.sub(r"[()]", "", product_id)
    return product_id.replace(".", "")


def xpath_literal(value: str) -> str:
    """把任意字符串转成 xpath 字符串字面量（同时含单双引号时用 concat）"""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"
