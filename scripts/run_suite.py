import argparse
import os
import shutil
import subprocess
import sys

import pytest

from config.settings import ALLURE_RESULTS_DIR, BROWSERS


def build_pytest_args(args) -> list[str]:
    pytest_args = list(args.files)
    if args.grep:
        pytest_args += ["-k", args.grep]
    for browser in args.browser:
        pytest_args += ["--browser", browser]
    if args.headed:
        pytest_args.append("--headed")
    if args.debug:
        pytest_args.append("--inspector")
    if args.markers:
        pytest_args += ["-m", args.markers]
    extra = args.pytest_args[1:] if args.pytest_args[:1] == ["--"] else args.pytest_args
    return pytest_args + extra


def show_report():
    allure = shutil.which("allure")
    if not allure:
        raise SystemExit("找不到 allure 命令行，请先安装 Allure Commandline")
    return subprocess.call([allure, "serve", str(ALLURE_RESULTS_DIR)])


def main(argv=None) -> int:
    """
        统一入口：python -m scripts.run_suite [--file ...] [--grep ...] [--browser ...] [--headed] [--debug]
        查看报告：python -m scripts.run_suite --report
    """
    parser = argparse.ArgumentParser(prog="run_suite", description="SauceDemo UI test runner")
    parser.add_argument("--file", dest="files", action="append", default=[], help="只跑指定测试文件，可重复")
    parser.add_argument("--grep", help="按用例名称过滤（pytest -k 表达式）")
    parser.add_argument("--browser", action="append", default=[], choices=BROWSERS, help="浏览器项目，可重复")
    parser.add_argument("--headed", action="store_true", help="有界面模式")
    parser.add_argument("--debug", action="store_true", help="打开 Playwright Inspector")
    parser.add_argument("-m", "--markers", help="pytest -m 表达式，例如 'ui and not known_defect'")
    parser.add_argument("--report", action="store_true", help="打开 allure 报告，不执行用例")
    parser.add_argument("pytest_args", nargs=argparse.REMAINDER, help="透传给 pytest 的其他参数")
    args = parser.parse_args(argv)

    if args.report:
        return show_report()
    if args.debug:
        os.environ["PWDEBUG"] = "1"
    return int(pytest.main(build_pytest_args(args)))


if __name__ == "__main__":
    sys.exit(main())
