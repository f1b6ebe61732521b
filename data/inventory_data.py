PRODUCT_COUNT = 6

# 排序下拉框 label
PRODUCT_SORT = {
    "name_asc": "Name (A to Z)",
    "name_desc": "Name (Z to A)",
    "price_asc": "Price (low to high)",
    "price_desc": "Price (high to low)",
}

# 站点全部商品名称；加购时只接受这些名称
CATALOG_ITEMS = [
    "Sauce Labs Backpack",
    "Sauce Labs Bike Light",
    "Sauce Labs Bolt T-Shirt",
    "Sauce Labs Fleece Jacket",
    "Sauce Labs Onesie",
    "Test.allTheThings() T-Shirt (Red)",
]
