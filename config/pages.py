import os

ENV = os.getenv("ENV", "prod")  # 运行环境，默认线上 demo 站点

BASE_URLS = {
    "prod": "https://www.saucedemo.com",
}

# 相对路径，BasePage.goto 会拼接 base url
PATHS = {
    "login": "/",
    "inventory": "/inventory.html",
    "product_details": "/inventory-item.html",
    "cart": "/cart.html",
    "checkout_step_one": "/checkout-step-one.html",
    "checkout_step_two": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}

# 断言 URL 用的正则，和 wait_url / expect_url 配合
URL_PATTERNS = {
    "inventory": r".*inventory\.html",
    "product_details": r".*inventory-item\.html",
    "cart": r".*cart\.html",
    "checkout_step_one": r".*checkout-step-one\.html",
    "checkout_step_two": r".*checkout-step-two\.html",
    "checkout_complete": r".*checkout-complete\.html",
    "login": r"^[^?#]*://[^/]+/?$",
}


def base_url() -> str:
    if ENV not in BASE_URLS:
        raise KeyError(f"未知环境 ENV={ENV}，可选：{list(BASE_URLS)}")
    return BASE_URLS[ENV]
