"""失败用例的多次 attempt 汇总（配合 pytest-rerunfailures）

attempt 记录结构：
{"attempt": 1, "status": "FAILED", "duration": 1.23, "error": "...", "url": "...",
 "has_screenshot": True, "has_video": True, "has_trace": True, "base_dir": "artifacts/..."}
"""

ATTACHMENT_FIELDS = ("has_screenshot", "has_video", "has_trace")


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
    """ 比较同一字段在不同 attempts 中的差异
    :return: 差异文本（按 attempt 顺序去重），没有差异则返回空字符串 """
    values = list(dict.fromkeys(str(a.get(field)) for a in attempts))
    return "\n".join(values) if len(values) > 1 else ""


def compare_attachments(attempts: list[dict]) -> str:
    """ 比较所有尝试中生成的附件差异（截图、视频、trace） """
    attachment_diff = []
    for field in ATTACHMENT_FIELDS:
        values = list(dict.fromkeys(a.get(field) for a in attempts))
        if len(values) > 1:
            attachment_diff.append(f"{field} difference: {', '.join(map(str, values))}")
    return ", ".join(attachment_diff)


def calculate_attempt_diff(attempts: list[dict]) -> dict[str, str]:
    """ 计算多个 attempts 之间的差异，只返回有差异的部分 """
    diff = {
        "Error Differences": compare_field(attempts, "error"),
        "URL Differences": compare_field(attempts, "url"),
        "Duration Differences": compare_field(attempts, "duration"),
        "Attachment Differences": compare_attachments(attempts),
    }
    return {title: content for title, content in diff.items() if content}


def render_attempt_summary(attempts: list[dict]) -> str:
    chain = " → ".join(
        f"Attempt {a['attempt']} {'❌' if a['status'] == 'FAILED' else '✔'}" for a in attempts)

    sections = ["🔁 Attempt Summary", chain, "", "🧠 Retry Insight"]
    sections += build_retry_insight(attempts) or ["• -"]

    diff = calculate_attempt_diff(attempts)
    if diff:
        sections += ["", "🔍 Attempt Diff Analysis"]
        for title, content in diff.items():
            sections += [f"[{title}]", content]

    for a in attempts:
        sections += ["", f"----- Attempt {a['attempt']} {a['status']} ({a.get('duration', '-')}s) -----",
                     f"URL: {a.get('url') or '-'}",
                     f"Artifacts: {a.get('base_dir') or '-'}",
                     f"Error: {a.get('error') or '-'}"]
    return "\n".join(sections)


def is_evidence_phase(when: str, failed: bool) -> bool:
    """call 阶段总要记录；setup 阶段只有失败才记录（need_login 登录失败发生在 setup）"""
    return when == "call" or (when == "setup" and failed)


def needs_attempt_summary(attempts: list[dict], attempt: int, max_attempts: int) -> bool:
    """本次 attempt 是否是最后一次执行，且之前出现过失败
    - 重跑后通过：通过的那次就是最后一次
    - 一直失败：执行到 max_attempts 为止"""
    current = next((a for a in attempts if a["attempt"] == attempt), None)
    if current is None or not any(a["status"] == "FAILED" for a in attempts):
        return False
    return current["status"] == "PASSED" or attempt >= max_attempts
