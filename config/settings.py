"""执行参数：环境、浏览器、超时、重试、产物目录
全部支持环境变量覆盖，CI 环境下强制 headless
"""
import os

ENV = os.getenv("SAUCE_ENV", "prod")

BROWSER = os.getenv("BROWSER", "chromium")  # chromium / firefox / webkit
HEADLESS = bool(os.getenv("CI")) or os.getenv("HEADLESS", "true").lower() not in ("0", "false", "no")
SLOW_MO = int(os.getenv("SLOW_MO", "0"))  # ms，调试时可设 100-500
VIEWPORT = {"width": 1280, "height": 720}

# 超时（毫秒）
TIMEOUTS = {
    "default": 30000,
    "short": 5000,
    "long": 60000,
}

# 通用重试策略：1 次调用 + 3 次重试，间隔 1s、2s、4s
RETRY = {
    "max_attempts": 4,
    "base_delay": 1.0,
}

# 产物目录，每次 session 启动前清空
ARTIFACTS_DIR = "artifacts"
VIDEOS_DIR = "videos"
TRACING_DIR = "tracing"
SCREENSHOTS_DIR = "screenshots"
ALLURE_RESULTS_DIR = "allure-results"
