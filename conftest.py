import json
import logging
import shutil
import time
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.pages import BASE_URL, URLS
from config.settings import (ALLURE_RESULTS_DIR, ARTIFACTS_DIR, BROWSER, ENV, HEADLESS, SCREENSHOTS_DIR, SLOW_MO,
                             TIMEOUTS, TRACING_DIR, VIDEOS_DIR, VIEWPORT)
from data.login_data import STANDARD_USER
from pages.login_page import LoginPage
from reporting.attempt_summary import is_evidence_phase, needs_attempt_summary, render_attempt_summary
from utils.common_utils import log_step

logger = logging.getLogger(__name__)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS, slow_mo=SLOW_MO)
    logger.info("🌐 %s started (headless=%s), target %s", BROWSER, HEADLESS, BASE_URL)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts(request):
    """测试session启动前，清空artifacts、videos、tracing、screenshots、allure-results
    只跑浏览器无关的单元测试时不清理"""
    if not any(item.get_closest_marker("ui") for item in request.session.items):
        return
    for path in [ARTIFACTS_DIR, VIDEOS_DIR, TRACING_DIR, SCREENSHOTS_DIR, ALLURE_RESULTS_DIR]:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)  # 删除目录 p 及其包含的所有文件和子目录。
        p.mkdir()


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法一个全新 context（用例隔离单位，互不共享状态）
    - 视频 + tracing 每个 attempt 单独目录
    - 用例通过则删除视频、trace；失败则移动到 artifacts 并附加到 Allure
    """
    attempt = getattr(request.node, "execution_count", 1)
    # 🔒 锁定本次 context 对应的 attempt
    request.node._current_attempt = attempt
    # rerun 时复用同一个 item，重置上一次的失败标记和 page
    request.node._failed = False
    request.node._page = None

    attempt_dir = f"attempt_{attempt}"
    record_video_dir = Path(VIDEOS_DIR) / attempt_dir
    record_tracing_dir = Path(TRACING_DIR) / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    context = browser.new_context(
        base_url=BASE_URL,
        record_video_dir=str(record_video_dir),
        record_video_size=VIEWPORT,
        viewport=VIEWPORT)
    context.set_default_timeout(TIMEOUTS["default"])
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 一定要先close：video真正写入磁盘

    attempts = getattr(request.node, "_attempts", [])
    if getattr(request.node, "_failed", False):
        keep_failure_artifacts(request.node, attempt, record_video_dir, trace_path, attempts)
    else:
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)

    # ======== 最后一次执行（重跑通过或次数用尽）才 attach Attempt Summary ========
    max_attempts = getattr(request.node.config.option, "reruns", 0) + 1
    if needs_attempt_summary(attempts, attempt, max_attempts):
        allure.attach(render_attempt_summary(attempts), name="🔁 Attempt Summary",
                      attachment_type=allure.attachment_type.TEXT)


def keep_failure_artifacts(item, attempt: int, record_video_dir: Path, trace_path: Path, attempts: list[dict]):
    """失败用例移动video、trace到artifacts目录
    pytest_runtest_makereport 早于 fixture teardown，此时 video、trace 才落盘"""
    target_dir = artifact_dir(item, attempt)
    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")

    for video in target_dir.glob("*.webm"):
        allure.attach.file(video, name="📎 Video", attachment_type=allure.attachment_type.WEBM)
    trace = target_dir / "trace.zip"
    if trace.exists():
        allure.attach.file(trace, name="📎 Playwright-Trace.zip (npx playwright show-trace)")

    # 将hook阶段收集的 attempt 信息补充完整
    current = next((a for a in attempts if a["attempt"] == attempt), None)
    if current is not None:
        current.update({
            "has_screenshot": (target_dir / "failure.png").exists(),
            "has_video": any(target_dir.glob("*.webm")),
            "has_trace": trace.exists(),
            "base_dir": str(target_dir),
        })


@pytest.fixture(scope="function")
def page(context, request):
    """每个测试方法一个新 page；标记 need_login 的用例先通过登录页登录"""
    page = context.new_page()
    console_errors = []

    # page.on("console") 是浏览器级别监听，不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors  # 挂到page上，方便hook里取
    # 登录失败时 page 还没有进入 funcargs，hook 从 item 上取
    request.node._page = page

    if request.node.get_closest_marker("need_login") is not None:
        with log_step(f"登录：{STANDARD_USER.username}"):
            login_page = LoginPage(page)
            login_page.open_login(URLS[ENV]["login"])
            login_page.login(STANDARD_USER.username, STANDARD_USER.password)
            login_page.wait_for_successful_login()

    yield page
    page.close()


def artifact_dir(item, attempt: int) -> Path:
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    path = Path(ARTIFACTS_DIR) / module_name / class_name / item.name / f"attempt_{attempt}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    记录每次 attempt 的结果；测试失败（包括 setup 阶段登录失败）时自动保存：
    - 截图
    - URL
    - Console errors
    """
    start = time.time()
    outcome = yield
    rep = outcome.get_result()
    duration = round(time.time() - start, 2)

    if not is_evidence_phase(rep.when, rep.failed):
        return

    page = item.funcargs.get("page") or getattr(item, "_page", None)
    if not page:
        return

    attempt = getattr(item, "execution_count", 1)
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append({
        "attempt": attempt,
        "status": "FAILED" if rep.failed else "PASSED",
        "duration": duration,
        "error": str(rep.longrepr) if rep.failed else "",
        "url": page.url,
        "has_screenshot": False,
        "has_video": False,
        "has_trace": False,
        "base_dir": None,
    })

    if not rep.failed:
        return

    # 标记失败（跨fixture通信：告诉 context 这是一次失败执行）
    item._failed = True

    base_dir = artifact_dir(item, attempt)
    screenshot = base_dir / "failure.png"
    page.screenshot(path=screenshot, full_page=True)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console = base_dir / "console_errors.json"
    console.write_text(json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False),
                       encoding="utf-8")
    logger.error("❌ %s failed at %s, artifacts -> %s", item.nodeid, page.url, base_dir)

    allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach.file(console, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
