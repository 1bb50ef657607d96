"""Preconfigured discount rules and sample products offered by the storefront."""

from collections.abc import Sequence
from typing import Optional

from .errors import InvalidArgumentError, errmsg
from .line_item import LineItem
from .rules import (
    BuyOneGetOneDiscount,
    DiscountRule,
    FixedAmountDiscount,
    NoDiscount,
    PercentageDiscount,
)

CATEGORIES = (
    "Electronics",
    "Clothing",
    "Books",
    "Home & Garden",
    "Sports",
    "Beauty",
)


def default_rules() -> list[DiscountRule]:
    """Rules a customer can pick from at checkout."""
    return [
        NoDiscount(),
        PercentageDiscount(10, 50),
        PercentageDiscount(20, 100),
        FixedAmountDiscount(5, 25),
        FixedAmountDiscount(15, 75),
        BuyOneGetOneDiscount(),
        BuyOneGetOneDiscount("Electronics"),
        BuyOneGetOneDiscount("Clothing", 50),
    ]


def sample_products() -> list[LineItem]:
    """Quick-add products, one unit each."""
    return [
        LineItem("Gaming Laptop", 999.99, "Electronics"),
        LineItem("Cotton T-Shirt", 24.99, "Clothing"),
        LineItem("Python Programming Book", 14.99, "Books"),
        LineItem("Wireless Mouse", 29.99, "Electronics"),
        LineItem("Coffee Mug", 12.99, "Home & Garden"),
        LineItem("Bluetooth Headphones", 89.99, "Electronics"),
        LineItem("Denim Jeans", 49.99, "Clothing"),
        LineItem("Fitness Tracker", 149.99, "Electronics"),
        LineItem("Cooking Book", 19.99, "Books"),
        LineItem("Plant Pot", 15.99, "Home & Garden"),
        LineItem("Running Shoes", 79.99, "Sports"),
        LineItem("Face Cream", 34.99, "Beauty"),
    ]


def find_rule(
    name: str, rules: Optional[Sequence[DiscountRule]] = None
) -> DiscountRule:
    """Look up a rule by its display name."""
    candidates = default_rules() if rules is None else rules
    for rule in candidates:
        if rule.name() == name:
            return rule
    raise InvalidArgumentError(f"{errmsg.UNKNOWN_RULE}: {name}")
