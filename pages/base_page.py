import re

import allure
from loguru import logger
from playwright.sync_api import Page, expect

from config.pages import base_url
from config.settings import SCREENSHOTS_DIR


class BasePage:
    """页面基础动作。各页面对象持有一个 BasePage（组合），不继承它。

    所有方法都接收 selector 字符串；找不到元素 / 不可操作时直接抛出 Playwright 的超时错误，
    只有 is_visible 例外。
    """

    def __init__(self, page: Page, url: str = None):
        self.page = page
        self.base_url = (url or base_url()).rstrip("/")

    # ========= 导航 =========
    def goto(self, path: str):
        url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            logger.debug(f"goto {url}")
            self.page.goto(url)

    def wait_for_page_load(self):
        self.page.wait_for_load_state("domcontentloaded")
        self.page.wait_for_load_state("networkidle")

    # ========= 基础动作 =========
    def locator(self, selector: str):
        return self.page.locator(selector)

    def click(self, selector: str):
        with allure.step(f"Click {selector}"):
            logger.debug(f"click {selector}")
            self.page.locator(selector).click()

    def fill(self, selector: str, text: str):
        with allure.step(f"Fill {selector}"):
            logger.debug(f"fill {selector} <- {text!r}")
            self.page.locator(selector).fill(text)

    def select_option(self, selector: str, value: str):
        with allure.step(f"Select {value} in {selector}"):
            logger.debug(f"select {selector} = {value}")
            self.page.locator(selector).select_option(value)

    # ========= 数据获取 =========
    def get_text(self, selector: str) -> str:
        text = self.page.locator(selector).text_content()
        return text.strip() if text else ""

    def get_texts(self, selector: str) -> list[str]:
        """按 DOM 顺序返回所有匹配元素的文本（不排序）"""
        return [t.strip() for t in self.page.locator(selector).all_text_contents() if t and t.strip()]

    def count(self, selector: str) -> int:
        return self.page.locator(selector).count()

    def is_visible(self, selector: str) -> bool:
        # 任何异常都当作不可见：元素不存在和检查本身出错在这里无法区分
        try:
            return self.page.locator(selector).is_visible()
        except Exception as e:
            logger.debug(f"is_visible({selector}) error treated as not visible: {e}")
            return False

    # ========= 断言 =========
    def expect_visible(self, selector: str):
        expect(self.page.locator(selector)).to_be_visible()

    def expect_text(self, selector: str, text: str):
        expect(self.page.locator(selector)).to_have_text(text)

    def expect_url(self, pattern: str):
        expect(self.page).to_have_url(re.compile(pattern))

    # ========= 辅助 =========
    def take_screenshot(self, name: str):
        SCREENSHOTS_DIR.mkdir(parents=True, exist_ok=True)
        path = SCREENSHOTS_DIR / f"{name}.png"
        self.page.screenshot(path=path, full_page=True)
        logger.info(f"screenshot saved -> {path}")
        return path
