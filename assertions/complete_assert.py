class CompleteAssert:

    @staticmethod
    def header(actual: str, expect: str):
        assert actual == expect, f"完成页标题：{actual!r}!={expect!r}"

    @staticmethod
    def body_contains(actual: str, expect_parts: list[str]):
        for part in expect_parts:
            assert part in actual, f"完成页正文缺少：{part!r}，实际：{actual!r}"
