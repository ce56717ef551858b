import json
import os
import shutil
from pathlib import Path

import allure
import pytest
from loguru import logger
from playwright.sync_api import sync_playwright, expect, Error as PlaywrightError

from config.pages import URL_PATTERNS, base_url
from config.settings import (ACTION_TIMEOUT, NAVIGATION_TIMEOUT, EXPECT_TIMEOUT, IS_CI, RETRIES, BROWSERS,
                             DEFAULT_BROWSER, VIEWPORT, ARTIFACTS_DIR, VIDEOS_DIR, TRACING_DIR, RESULTS_JSON,
                             CLEAN_DIRS)
from data.fixture_data import CREDENTIALS
from pages.cart_page import CartPage
from pages.checkout_complete_page import CheckOutCompletePage
from pages.checkout_info_page import CheckOutInfoPage
from pages.checkout_overview_page import CheckOutOverviewPage
from pages.login_page import LoginPage
from pages.product_details_page import ProductDetailsPage
from pages.products_page import ProductsPage
from pages.side_menu import SideMenu
from reporting.results_json import ResultsRecorder
from reporting.retry_insight import attach_attempt_summary
from utils.logger import init_logger

pytest_plugins = ["pytester"]

MARKERS = {
    "ui": "浏览器端到端用例",
    "unit": "不启动浏览器的单元测试",
    "tc(id)": "用例编号，例如 TC-01，同步到 allure 的 id 标签",
    "known_defect": "被测站点已知缺陷：断言的是期望行为，当前必然失败（配合 xfail strict）",
    "only": "本地调试时只跑带该标记的用例；CI 上出现该标记直接报错",
}


# ================== 命令行参数 ==================
def pytest_addoption(parser):
    group = parser.getgroup("saucedemo", "SauceDemo UI tests")
    group.addoption("--browser", action="append", default=[], dest="browsers", choices=BROWSERS,
                    help=f"浏览器项目，可重复传入；默认 {DEFAULT_BROWSER}")
    group.addoption("--headed", action="store_true", default=False, help="有界面模式运行")
    group.addoption("--slowmo", action="store", type=int, default=0, help="每个操作之间的延迟（毫秒）")
    group.addoption("--inspector", action="store_true", default=False,
                    help="调试模式：设置 PWDEBUG=1 打开 Playwright Inspector（强制有界面）")


def pytest_configure(config):
    init_logger()
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")

    # CI 上整条用例重跑（pytest-rerunfailures），命令行显式传了 --reruns 时以命令行为准
    if IS_CI and not getattr(config.option, "reruns", 0):
        config.option.reruns = RETRIES
        logger.info(f"CI detected, reruns={RETRIES}")

    expect.set_options(timeout=EXPECT_TIMEOUT)
    config._results_recorder = ResultsRecorder(RESULTS_JSON)


def pytest_collection_modifyitems(config, items):
    """处理 @pytest.mark.only：本地聚焦，CI 禁止"""
    focused = [item for item in items if item.get_closest_marker("only")]
    if not focused:
        return
    if IS_CI:
        raise pytest.UsageError(f"@pytest.mark.only 不允许出现在 CI：{[i.nodeid for i in focused]}")
    deselected = [item for item in items if not item.get_closest_marker("only")]
    config.hook.pytest_deselected(items=deselected)
    items[:] = focused
    logger.warning(f"only marker found, running {len(focused)} focused test(s)")


def pytest_generate_tests(metafunc):
    """每个 --browser 作为一个浏览器项目，参数化所有用到浏览器的用例"""
    if "browser_name" in metafunc.fixturenames:
        browsers = list(dict.fromkeys(metafunc.config.getoption("browsers"))) or [DEFAULT_BROWSER]
        metafunc.parametrize("browser_name", browsers, scope="session")


def pytest_sessionfinish(session, exitstatus):
    recorder = getattr(session.config, "_results_recorder", None)
    if recorder and recorder.tests:
        path = recorder.write()
        logger.info(f"results -> {path} (exit status {int(exitstatus)})")


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance(pytestconfig):
    if pytestconfig.getoption("inspector"):
        os.environ["PWDEBUG"] = "1"
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, browser_name, pytestconfig):
    """每个浏览器项目只启动一次"""
    headed = pytestconfig.getoption("headed") or pytestconfig.getoption("inspector")
    browser = getattr(playwright_instance, browser_name).launch(
        headless=not headed,
        slow_mo=pytestconfig.getoption("slowmo"))
    logger.info(f"{browser_name} {browser.version} launched (headless={not headed})")
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing、allure-results、test-results"""
    for p in CLEAN_DIRS:
        if p.exists():
            shutil.rmtree(p)  # 删除目录 p 及其包含的所有文件和子目录。
        p.mkdir(parents=True)


# ================== Function Fixtures ==================
@pytest.fixture(scope="function", autouse=True)
def tag_test_case(request):
    """@pytest.mark.tc("TC-01") -> allure id 标签"""
    marker = request.node.get_closest_marker("tc")
    if marker:
        allure.dynamic.id(marker.args[0])


@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法一个全新 context：cookies / storage / 导航状态互不影响
    - 视频每个 attempt 单独目录，只保留失败的
    - trace 只在第一次重试（attempt 2）时录制
    """
    attempt = getattr(request.node, "execution_count", 1)

    attempt_dir = f"attempt_{attempt}"
    record_video_dir = VIDEOS_DIR / attempt_dir
    record_tracing_dir = TRACING_DIR / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)
    record_trace = attempt == 2

    context = browser.new_context(
        base_url=base_url(),
        viewport=VIEWPORT,
        record_video_dir=str(record_video_dir),  # video文件只有在context.close()后才会真正落盘
        record_video_size=VIEWPORT)
    context.set_default_timeout(ACTION_TIMEOUT)
    context.set_default_navigation_timeout(NAVIGATION_TIMEOUT)

    if record_trace:
        context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        if record_trace:
            context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 一定要先close：video真正写入磁盘

    failed = attempt in getattr(request.node, "_failed_attempts", set())
    attempts = getattr(request.node, "_attempts", [])
    if not failed:
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        if len(attempts) > 1:
            attach_attempt_summary(attempts)  # 重试后通过
        return

    #  ======== 失败用例：video、trace 移到 artifacts 目录 ========
    target_dir = artifact_dir(request.node, attempt)
    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")
    shutil.rmtree(record_video_dir, ignore_errors=True)
    shutil.rmtree(record_tracing_dir, ignore_errors=True)

    # 补充 hook 阶段记录的 attempt 信息（video、trace 在这里才生成）
    current = next((a for a in attempts if a["attempt"] == attempt), None)
    if current is not None:
        current.update({
            "has_screenshot": (target_dir / "failure.png").exists(),
            "has_video": any(target_dir.glob("*.webm")),
            "has_trace": (target_dir / "trace.zip").exists(),
            "base_dir": str(target_dir),
        })

    for video in target_dir.glob("*.webm"):
        allure.attach.file(video, name="Video", attachment_type=allure.attachment_type.WEBM)
    trace = target_dir / "trace.zip"
    if trace.exists():
        allure.attach.file(trace, name="Playwright-Trace.zip (npx playwright show-trace)")

    # 只在最后一次 attempt attach Attempt Summary
    max_attempts = (getattr(request.node.config.option, "reruns", 0) or 0) + 1
    if attempt == max_attempts:
        attach_attempt_summary(attempts)


@pytest.fixture(scope="function")
def page(context, request):
    """每个测试方法一个新 page"""
    page = context.new_page()
    # 前置 fixture 里失败时 item.funcargs 里还没有 page，hook 从这里取
    request.node._page = page
    console_error = []  # 收集 console.error，失败时落盘

    page.on(
        "console",
        lambda msg: console_error.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_error  # 挂到page上，方便hook里取
    yield page
    page.close()
    request.node._page = None


# ================== Page Object Fixtures ==================
@pytest.fixture(scope="function")
def login_page(page):
    return LoginPage(page)


@pytest.fixture(scope="function")
def products_page(page):
    return ProductsPage(page)


@pytest.fixture(scope="function")
def product_details_page(page):
    return ProductDetailsPage(page)


@pytest.fixture(scope="function")
def cart_page(page):
    return CartPage(page)


@pytest.fixture(scope="function")
def checkout_info_page(page):
    return CheckOutInfoPage(page)


@pytest.fixture(scope="function")
def checkout_overview_page(page):
    return CheckOutOverviewPage(page)


@pytest.fixture(scope="function")
def checkout_complete_page(page):
    return CheckOutCompletePage(page)


@pytest.fixture(scope="function")
def side_menu(page):
    return SideMenu(page)


@pytest.fixture(scope="function")
def logged_in(page, login_page):
    """前置条件：打开登录页，用有效账号登录，停在 inventory 页"""
    login_page.navigate()
    login_page.login(CREDENTIALS["valid"]["username"], CREDENTIALS["valid"]["password"])
    login_page.base.expect_url(URL_PATTERNS["inventory"])
    return page


# ================== Pytest Hook：失败处理 ==================
def artifact_dir(item, attempt: int) -> Path:
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    target = ARTIFACTS_DIR / module_name / class_name / item.name / f"attempt_{attempt}"
    target.mkdir(parents=True, exist_ok=True)
    return target


def report_outcome(rep) -> str:
    if hasattr(rep, "wasxfail"):
        return "xfailed" if rep.skipped else "xpassed"
    if rep.when == "setup" and rep.failed:
        return "error"
    return rep.outcome


def record_result(item, rep):
    if rep.when != "call" and not (rep.when == "setup" and (rep.failed or rep.skipped)):
        return
    recorder = getattr(item.config, "_results_recorder", None)
    if recorder is None:
        return
    tc = item.get_closest_marker("tc")
    callspec = getattr(item, "callspec", None)
    recorder.record(
        item.nodeid,
        report_outcome(rep),
        rep.duration,
        attempt=getattr(item, "execution_count", 1),
        tc_id=tc.args[0] if tc else None,
        browser=callspec.params.get("browser_name") if callspec else None,
        error=str(rep.longrepr) if rep.failed else "")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    测试失败（包括前置 fixture 失败）时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()
    record_result(item, rep)

    # call 阶段，以及前置 fixture（登录、加购等）失败的 setup 阶段
    if rep.when != "call" and not (rep.when == "setup" and rep.failed):
        return

    page = getattr(item, "_page", None)
    if page is None:
        return

    attempt = getattr(item, "execution_count", 1)
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append({
        "attempt": attempt,
        "status": "FAILED" if rep.failed else "PASSED",
        "duration": round(rep.duration, 2),
        "error": str(rep.longrepr) if rep.failed else "",
        "url": page.url,
        "has_screenshot": False,
        "has_video": False,
        "has_trace": False,
    })

    if not rep.failed:
        return

    # 标记失败（跨fixture通信：告诉 context 保留 video / trace）
    item._failed_attempts = getattr(item, "_failed_attempts", set()) | {attempt}

    base_dir = artifact_dir(item, attempt)
    logger.warning(f"{item.nodeid} failed (attempt {attempt}), artifacts -> {base_dir}")
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    (base_dir / "console_errors.json").write_text(
        json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")
    try:
        page.screenshot(path=base_dir / "failure.png", full_page=True)
    except PlaywrightError as e:
        logger.warning(f"failure screenshot not captured: {e}")
        return

    allure.attach.file(base_dir / "failure.png", name="Failure-Screenshot",
                       attachment_type=allure.attachment_type.PNG)
