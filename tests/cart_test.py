import pytest

from data.checkout_data import CHECKOUT_ITEMS, CHECKOUT_ITEMS_TOTAL, PRODUCTS
from pages.cart_page import CartPage
from pages.inventory_page import InventoryPage

BACKPACK, BIKE_LIGHT, BOLT_T_SHIRT = CHECKOUT_ITEMS


@pytest.fixture(scope="function")
def inventory_page(page):
    inventory_page = InventoryPage(page)
    inventory_page.wait_for_page_load()
    return inventory_page


@pytest.fixture(scope="function")
def cart_page(page):
    return CartPage(page)


def add_and_open_cart(inventory_page, cart_page, items):
    inventory_page.add_items_to_cart(items)
    inventory_page.verify_cart_item_count(len(items))
    inventory_page.go_to_cart()
    cart_page.wait_for_page_load()


@pytest.mark.ui
@pytest.mark.need_login
class TestCart:

    @pytest.mark.parametrize("items", [
        [BACKPACK],
        [BOLT_T_SHIRT, BACKPACK],
        [BOLT_T_SHIRT, BIKE_LIGHT, BACKPACK],
        [BIKE_LIGHT, BACKPACK, BOLT_T_SHIRT],
    ])
    def test_cart_items_match_added(self, inventory_page, cart_page, items):
        """购物车页面商品 = inventory页面加购商品（与加购顺序无关）"""
        add_and_open_cart(inventory_page, cart_page, items)
        assert cart_page.is_on_cart_page()
        cart_page.verify_cart_items(items)
        cart_page.verify_cart_item_count(len(items))
        assert cart_page.is_checkout_button_enabled()

    def test_cart_prices_match_catalog(self, inventory_page, cart_page):
        add_and_open_cart(inventory_page, cart_page, CHECKOUT_ITEMS)
        expected = {p.name: p.price for p in PRODUCTS.values()}
        for item in cart_page.get_cart_items():
            assert f"${item.price}" == expected[item.name], f"{item.name}价格{item.price}!={expected[item.name]}"
        assert cart_page.get_total_price() == CHECKOUT_ITEMS_TOTAL

    def test_remove_item_from_cart(self, inventory_page, cart_page):
        add_and_open_cart(inventory_page, cart_page, [BACKPACK, BIKE_LIGHT])
        assert cart_page.remove_item_from_cart(BACKPACK)
        cart_page.verify_cart_items([BIKE_LIGHT])

    def test_remove_missing_item_is_noop(self, inventory_page, cart_page):
        add_and_open_cart(inventory_page, cart_page, [BACKPACK])
        assert not cart_page.remove_item_from_cart(BOLT_T_SHIRT)
        cart_page.verify_cart_items([BACKPACK])

    def test_remove_all_items_empties_cart(self, inventory_page, cart_page):
        add_and_open_cart(inventory_page, cart_page, [BACKPACK])
        cart_page.remove_item_from_cart(BACKPACK)
        cart_page.wait_hidden(cart_page.cart_items)
        assert cart_page.is_cart_empty()

    def test_continue_shopping(self, inventory_page, cart_page):
        """继续购物后再加购，购物车保留第一次加购的商品"""
        add_and_open_cart(inventory_page, cart_page, [BACKPACK])
        cart_page.click_continue_shopping()
        inventory_page.add_item_to_cart(BIKE_LIGHT)
        inventory_page.verify_cart_item_count(2)
        inventory_page.go_to_cart()
        cart_page.verify_cart_items([BACKPACK, BIKE_LIGHT])
