LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
    "login_logo": ".login_logo",  # 登录页logo
    "bot_image": ".bot_column",  # 登录页机器人图片
}

INVENTORY_LOCATORS = {
    "inventory_container": "#inventory_container",  # 商品列表容器
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_product_desc": "[data-test='inventory-item-desc']",  # 单商品描述
    "add_to_cart_button": "[data-test='add-to-cart-{slug}']",  # 按商品定位加购按钮
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
    "menu_button": "#react-burger-menu-btn",  # 左上角菜单
    "logout_link": "#logout_sidebar_link",  # 退出登录
}

CART_LOCATORS = {
    "cart_container": "#cart_contents_container",  # 购物车容器
    "cart_item": ".cart_item",  # 购物车商品行
    "item_product_name": ".inventory_item_name",  # 单商品名称
    "item_product_price": ".inventory_item_price",  # 单商品价格
    "remove_button": "[data-test^='remove']",  # 商品行内remove按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
}

CHECKOUT_INFO_LOCATORS = {
    # --------checkout-step-one.html---------
    "checkout_info_container": "#checkout_info_container",
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "container_error_msg": "[data-test='error']",  # 未填写收货人信息提交错误提示msg Error: First Name is required
    "cancel_button": "[data-test='cancel']",  # 取消按钮
    "continue_button": "[data-test='continue']",  # 继续按钮
}

CHECKOUT_OVERVIEW_LOCATORS = {
    # --------checkout-step-two.html---------
    "checkout_summary_container": "#checkout_summary_container",
    "cart_item": ".cart_item",  # 订单确认页面商品行
    "item_product_name": ".inventory_item_name",  # 单商品名称
    "item_product_price": ".inventory_item_price",  # 单商品价格
    # 订单价格
    "payment_information": "[data-test='payment-info-value']",  # 支付信息value
    "shipping_information": "[data-test='shipping-info-value']",  # 配送信息value
    "products_price": "[data-test='subtotal-label']",  # 商品价格
    "tax_price": "[data-test='tax-label']",  # 税费
    "order_price": "[data-test='total-label']",  # 订单价格
    # 操作步骤
    "cancel_button": "[data-test='cancel']",  # 取消按钮
    "finish_button": "[data-test='finish']",  # 完成按钮
}

CHECKOUT_COMPLETE_LOCATORS = {
    # --------checkout-complete.html---------
    "checkout_complete_container": "#checkout_complete_container",
    "complete_header": "[data-test='complete-header']",  # 完成页面标题
    "complete_text": "[data-test='complete-text']",  # 完成页面正文
    "pony_express": "[data-test='pony-express']",  # 完成页面图片
    "back_home_button": "[data-test='back-to-products']",  # 返回商品列表
}
