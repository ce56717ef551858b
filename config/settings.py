import os
from pathlib import Path

# ========= 超时（毫秒；单条用例超时见 pyproject.toml 的 timeout） =========
ACTION_TIMEOUT = 10_000  # 单个 click/fill 等动作
NAVIGATION_TIMEOUT = 30_000  # goto / 跳转
EXPECT_TIMEOUT = 5_000  # expect(...) 断言

# ========= 重试 =========
IS_CI = bool(os.getenv("CI"))
RETRIES = 2 if IS_CI else 0  # 只在 CI 上整条用例重跑

# ========= 浏览器 =========
BROWSERS = ("chromium", "firefox", "webkit")
DEFAULT_BROWSER = "chromium"
VIEWPORT = {"width": 1280, "height": 720}

# ========= 产物目录 =========
ARTIFACTS_DIR = Path("artifacts")  # 失败用例证据：截图、url、console、视频、trace
VIDEOS_DIR = Path("videos")
TRACING_DIR = Path("tracing")
SCREENSHOTS_DIR = Path("screenshots")
ALLURE_RESULTS_DIR = Path("allure-results")
RESULTS_JSON = Path("test-results") / "results.json"

# session 启动前清空
CLEAN_DIRS = [ARTIFACTS_DIR, VIDEOS_DIR, TRACING_DIR, ALLURE_RESULTS_DIR, RESULTS_JSON.parent]

# ========= 日志 =========
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")  # 例如 logs/ui-tests.log，不设置则只输出到控制台
