LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息 / 未登录访问受保护页面的提示
}

PRODUCTS_LOCATORS = {
    "inventory_list": ".inventory_list",  # 商品列表容器
    "item_product": ".inventory_item",  # 单个商品
    "item_product_name": ".inventory_item_name",  # 商品名称
    "item_product_price": ".inventory_item_price",  # 商品价格
    "product_sort_type": ".product_sort_container",  # 排序下拉框
    "cart_badge": ".shopping_cart_badge",  # 购物车角标
    "cart_link": ".shopping_cart_link",  # 购物车icon
    # 按商品 id 拼接的按钮，product_id 由 utils.common_utils.to_product_id 生成
    "add_to_cart_button": "[data-test='add-to-cart-{product_id}']",
    "remove_button": "[data-test='remove-{product_id}']",
}

PRODUCT_DETAILS_LOCATORS = {
    "product_name": "[data-test='inventory-item-name']",
    "product_desc": "[data-test='inventory-item-desc']",
    "product_price": "[data-test='inventory-item-price']",
    "add_to_cart_button": "[data-test='add-to-cart']",  # 详情页按钮不带商品 id
    "remove_button": "[data-test='remove']",
    "back_button": "[data-test='back-to-products']",
}

CART_LOCATORS = {
    "cart_item": ".cart_item",  # 购物车商品行
    "cart_item_name": ".inventory_item_name",
    "cart_badge": ".shopping_cart_badge",
    "continue": "#continue-shopping",  # 继续购物按钮
    "checkout_button": "#checkout",  # 结算按钮
    # 购物车页 remove 按钮的 id 与商品名不是同一套规则，只能按名称反查所在行
    "cart_item_by_name": "xpath=//div[@class='cart_item']//div[@class='inventory_item_name' and text()={name}]",
    "remove_by_name": (
        "xpath=//div[@class='cart_item']//div[@class='inventory_item_name' and text()={name}]"
        "/ancestor::div[@class='cart_item']//button[contains(@id, 'remove')]"
    ),
}

CHECKOUT_INFO_LOCATORS = {
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "continue_button": "[data-test='continue']",  # 继续按钮
    "cancel_button": "[data-test='cancel']",  # 取消按钮
    "error_msg": "[data-test='error']",  # Error: First Name is required
}

CHECKOUT_OVERVIEW_LOCATORS = {
    "item_product_name": ".inventory_item_name",
    "item_product_price": ".inventory_item_price",
    "subtotal_label": ".summary_subtotal_label",  # Item total: $XX.XX
    "tax_label": ".summary_tax_label",  # Tax: $X.XX
    "total_label": ".summary_total_label",  # Total: $XX.XX
    "finish_button": "[data-test='finish']",
    "cancel_button": "[data-test='cancel']",
}

CHECKOUT_COMPLETE_LOCATORS = {
    "complete_header": ".complete-header",  # Thank you for your order!
    "complete_text": ".complete-text",
    "back_home_button": "#back-to-products",
}

MENU_LOCATORS = {
    "burger_button": "#react-burger-menu-btn",
    "logout_link": "#logout_sidebar_link",
}
