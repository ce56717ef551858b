"""重试分析：每条用例的 attempts 记录 -> Attempt Summary 文本（attach 到 allure）

attempt 记录格式（由 conftest 的 hook / context fixture 填充）：
    {"attempt": 1, "status": "FAILED", "duration": 3.2, "error": "...", "url": "...",
     "has_screenshot": True, "has_video": True, "has_trace": False, "base_dir": "artifacts/..."}
"""
import allure


def build_retry_insight(attempts: list[dict]) -> list[str]:
    """生成RetryInsight文本"""
    lines = []

    failed = [a for a in attempts if a["status"] == "FAILED"]
    passed = [a for a in attempts if a["status"] == "PASSED"]

    if failed and passed:
        lines += [f"• Failed {len(failed)} times, then passed on retry", "• Likely flaky test (unstable behavior)"]
    elif attempts and len(failed) == len(attempts):
        lines.append(f"• All {len(attempts)} attempts failed")

    errors = {a["error"] for a in failed if a.get("error")}
    if len(errors) == 1:
        lines.append("• Same error across failed attempts")
    elif len(errors) > 1:
        lines.append("• Error message changed between attempts")

    urls = {a["url"] for a in attempts if a.get("url")}
    if len(urls) > 1:
        lines.append("• Failed at different URLs")
    return lines


def compare_field(attempts: list[dict], field: str) -> str:
    """ 比较同一字段在不同 attempts 中的差异，没有差异返回空字符串 """
    values = []
    for a in attempts:
        value = a.get(field)
        if value not in values:
            values.append(value)
    return "\n".join(map(str, values)) if len(values) > 1 else ""


def compare_attachments(attempts: list[dict]) -> str:
    """ 比较截图、视频、trace 在各 attempt 中是否都生成了 """
    attachment_diff = []
    for field in ["has_screenshot", "has_video", "has_trace"]:
        values = {a.get(field) for a in attempts}
        if len(values) > 1:
            attachment_diff.append(f"{field} difference: {', '.join(map(str, sorted(values, key=str)))}")
    return ", ".join(attachment_diff)


def calculate_attempt_diff(attempts: list[dict]) -> str:
    sections = []
    for title, diff in (("Error Differences", compare_field(attempts, "error")),
                        ("URL Differences", compare_field(attempts, "url")),
                        ("Duration Differences", compare_field(attempts, "duration")),
                        ("Attachment Differences", compare_attachments(attempts))):
        if diff:
            sections.append(f"[{title}]\n{diff}")
    return "\n\n".join(sections)


def render_attempt_summary(attempts: list[dict]) -> str:
    chain = " -> ".join(f"Attempt {a['attempt']} {a['status']}" for a in attempts)
    lines = ["Attempt Summary", chain, ""]

    insight = build_retry_insight(attempts)
    if insight:
        lines += ["Retry Insight"] + insight + [""]

    diff = calculate_attempt_diff(attempts)
    if diff:
        lines += ["Attempt Diff", diff, ""]

    for a in attempts:
        lines.append(f"--- Attempt {a['attempt']} ({a['status']}, {a.get('duration')}s)")
        lines.append(f"URL: {a.get('url') or '-'}")
        lines.append("Artifacts: " + ", ".join(
            f"{name}={'yes' if a.get(key) else 'no'}"
            for name, key in (("screenshot", "has_screenshot"), ("video", "has_video"), ("trace", "has_trace"))))
        if a.get("base_dir"):
            lines.append(f"Dir: {a['base_dir']}")
        lines.append(f"Error: {a.get('error') or '-'}")
    return "\n".join(lines)


def attach_attempt_summary(attempts: list[dict]):
    if not attempts:
        return
    allure.attach(render_attempt_summary(attempts), name="Attempt Summary",
                  attachment_type=allure.attachment_type.TEXT)
