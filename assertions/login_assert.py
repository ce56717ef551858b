import re

from config.pages import URL_PATTERNS


class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert expect_msg in actual_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def error_displayed(displayed: bool):
        assert displayed, "登录页错误提示未显示"

    @staticmethod
    def redirected_to_login(url: str, protected_path: str):
        """未登录访问受保护页面：应回到根路径，且 URL 不再包含受保护页面"""
        assert protected_path not in url, f"未被重定向，当前URL仍为受保护页面：{url}"
        assert re.match(URL_PATTERNS["login"], url), f"未重定向到登录页（根路径）：{url}"
