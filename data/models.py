"""测试数据值对象：只在单个用例内构造、使用、丢弃"""
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class LineItem:
    """购物车/订单确认页的一行商品"""
    name: str
    price: Decimal


@dataclass(frozen=True)
class Product:
    name: str
    price: str  # 页面展示格式，如 "$29.99"
    description: str
