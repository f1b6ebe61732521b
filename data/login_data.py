"""login功能测试数据：账号、登录错误提示信息
正常登录 standard_user
性能抖动用户 performance_glitch_user（登录慢，需要更长超时）
被锁定用户 locked_out_user
无效账号
用户名为空
密码为空
problem_user 目前没有用例使用，保留备用
"""
from data.models import Credentials

STANDARD_USER = Credentials("standard_user", "secret_sauce")
INVALID_USER = Credentials("invalid_user", "invalid_password")
LOCKED_OUT_USER = Credentials("locked_out_user", "secret_sauce")
PROBLEM_USER = Credentials("problem_user", "secret_sauce")
PERFORMANCE_GLITCH_USER = Credentials("performance_glitch_user", "secret_sauce")

ERROR_MESSAGES = {
    "locked_out": "Epic sadface: Sorry, this user has been locked out.",
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
    "required_username": "Epic sadface: Username is required",
    "required_password": "Epic sadface: Password is required",
}

# 登录失败场景参数化：username、password、期望错误提示
LOGIN_FAIL_CASES = {
    "invalid_user": {"username": INVALID_USER.username, "password": INVALID_USER.password,
                     "error_msg": ERROR_MESSAGES["invalid_credentials"]},
    "wrong_password": {"username": STANDARD_USER.username, "password": "12345",
                       "error_msg": ERROR_MESSAGES["invalid_credentials"]},
    "locked_out_user": {"username": LOCKED_OUT_USER.username, "password": LOCKED_OUT_USER.password,
                        "error_msg": ERROR_MESSAGES["locked_out"]},
    "empty_username_password": {"username": "", "password": "",
                                "error_msg": ERROR_MESSAGES["required_username"]},
    "empty_username": {"username": "", "password": STANDARD_USER.password,
                       "error_msg": ERROR_MESSAGES["required_username"]},
    "empty_password": {"username": STANDARD_USER.username, "password": "",
                       "error_msg": ERROR_MESSAGES["required_password"]},
}

PAGE_TITLE = "Swag Labs"
