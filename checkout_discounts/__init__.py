"""Checkout discount rules for shopping carts."""

from .errors import (
    DiscountError,
    InvalidArgumentError,
    errmsg,
)
from .line_item import LineItem
from .rules import (
    DiscountRule,
    NoDiscount,
    PercentageDiscount,
    FixedAmountDiscount,
    BuyOneGetOneDiscount,
    items_subtotal,
)
from .cart import Cart
from .catalog import (
    CATEGORIES,
    default_rules,
    sample_products,
    find_rule,
)
from .receipt import format_cart_summary, format_checkout
from .config import Settings, load_settings, configure_logging

__all__ = [
    # Errors
    "DiscountError",
    "InvalidArgumentError",
    "errmsg",
    # Items
    "LineItem",
    # Rules
    "DiscountRule",
    "NoDiscount",
    "PercentageDiscount",
    "FixedAmountDiscount",
    "BuyOneGetOneDiscount",
    "items_subtotal",
    # Cart
    "Cart",
    # Catalog
    "CATEGORIES",
    "default_rules",
    "sample_products",
    "find_rule",
    # Formatting
    "format_cart_summary",
    "format_checkout",
    # Config
    "Settings",
    "load_settings",
    "configure_logging",
]
