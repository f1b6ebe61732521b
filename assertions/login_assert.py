class LoginAssert:

    @staticmethod
    def error_message(actual_msg, expect_msg: str):
        assert actual_msg, f"登录错误提示信息未显示，期望：{expect_msg}"
        assert actual_msg == expect_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def still_on_login(current_url: str, forbidden_path: str):
        """登录失败不能离开登录页"""
        assert forbidden_path not in current_url, f"登录失败后不应跳转到{forbidden_path}，当前url：{current_url}"

    @staticmethod
    def field_value(actual: str, expect: str, field: str):
        assert actual == expect, f"{field}输入框的值：{actual!r}!={expect!r}"
