from collections import Counter


class CartAssert:

    @staticmethod
    def item_count(actual: int, expect: int):
        assert actual == expect, f"购物车页面商品数量错误：{actual}!={expect}"

    @staticmethod
    def items_match(expected_items: list[str], actual_items: list[str]):
        """加购商品=页面商品？名称、数量一致，不关心顺序"""
        for expected in expected_items:
            assert expected in actual_items, f"加购的商品{expected}，在页面不存在：{actual_items}"
        assert len(actual_items) == len(expected_items), \
            f"已加购商品数量{len(expected_items)} !=页面商品数量 {len(actual_items)}"
        assert Counter(actual_items) == Counter(expected_items), \
            f"页面商品{actual_items}与加购商品{expected_items}不一致"
