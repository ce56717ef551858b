"""页面提示文案（断言时只做包含判断，不要求完全一致）"""

LOGIN_MESSAGES = {
    "credentials_mismatch": "Username and password do not match",
    "access_denied": "Epic sadface",
    "access_denied_full": "Epic sadface: You can only access",
}

CHECKOUT_MESSAGES = {
    "first_name_required": "First Name is required",
    "last_name_required": "Last Name is required",
    "postal_code_required": "Postal Code is required",
    "order_complete": "Thank you for your order",
}
