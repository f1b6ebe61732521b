import os

from config.settings import ENV

BASE_URLS = {
    "prod": "https://www.saucedemo.com",
}

BASE_URL = os.getenv("SAUCE_BASE_URL", BASE_URLS.get(ENV, BASE_URLS["prod"])).rstrip("/")

# 各页面 url 片段：页面跳转只通过 url 是否包含该片段来确认
PATHS = {
    "login": "/",
    "inventory": "/inventory.html",
    "cart": "/cart.html",
    "checkout_info": "/checkout-step-one.html",
    "checkout_overview": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}

URLS = {
    ENV: {name: BASE_URL + path for name, path in PATHS.items()},
}
