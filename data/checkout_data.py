"""checkout流程测试数据：加购商品、收货人信息、页面提示文案
文案必须与站点当前文案完全一致
"""
from decimal import Decimal

from data.models import CheckoutInfo, Product

PRODUCTS = {
    "backpack": Product(
        name="Sauce Labs Backpack",
        price="$29.99",
        description="carry.allTheThings() with the sleek, streamlined Sly Pack that melds uncompromising "
                    "style with unequaled laptop and tablet protection."),
    "bike_light": Product(
        name="Sauce Labs Bike Light",
        price="$9.99",
        description="A red light isn't the desired state in testing but it sure helps when riding your bike "
                    "at night. Water-resistant with 3 lighting modes, 1 AAA battery included."),
    "bolt_t_shirt": Product(
        name="Sauce Labs Bolt T-Shirt",
        price="$15.99",
        description="Get your testing superhero on with the Sauce Labs bolt T-shirt. From American Apparel, "
                    "100% ringspun combed cotton, heather gray with red bolt."),
}

CHECKOUT_ITEMS = [p.name for p in PRODUCTS.values()]
CHECKOUT_ITEMS_TOTAL = Decimal("55.97")

CHECKOUT_INFORMATION = CheckoutInfo(first_name="demo", last_name="user", postal_code="12345")

CHECKOUT_ERROR_MESSAGES = {
    "required_first_name": "Error: First Name is required",
    "required_last_name": "Error: Last Name is required",
    "required_postal_code": "Error: Postal Code is required",
}

# 收货人信息缺失场景：任意字段为空都不能进入 step two
MISSING_FIELD_CASES = {
    "all_empty": (CheckoutInfo("", "", ""), CHECKOUT_ERROR_MESSAGES["required_first_name"]),
    "first_name_only": (CheckoutInfo("demo", "", ""), CHECKOUT_ERROR_MESSAGES["required_last_name"]),
    "missing_postal_code": (CheckoutInfo("demo", "user", ""), CHECKOUT_ERROR_MESSAGES["required_postal_code"]),
    "missing_first_name": (CheckoutInfo("", "user", "12345"), CHECKOUT_ERROR_MESSAGES["required_first_name"]),
}

SUCCESS_MESSAGES = {
    "order_complete": "Thank you for your order!",
    "order_dispatched": "Your order has been dispatched",
    "pony_arrival": "will arrive just as fast as the pony can get there!",
}

PRICE_TOLERANCE = Decimal("0.01")
