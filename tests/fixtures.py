"""Shared test fixtures for consistent cart contents across all test modules.

Carts:
- electronics: laptop + mouse, the percentage-off example
- pen: a single cheap item, for fixed discounts larger than the order
- mice: three of the same mouse, for buy-one-get-one pairs
- mixed: mice and t-shirts across two categories
"""

from checkout_discounts import Cart, DiscountRule, LineItem


LAPTOP = LineItem("Laptop", 999.99, "Electronics", 1)
MOUSE = LineItem("Mouse", 29.99, "Electronics", 1)
PEN = LineItem("Pen", 2.99, "Office", 1)
GAMING_MOUSE_X3 = LineItem("Mouse", 49.99, "Electronics", 3)
T_SHIRT_X4 = LineItem("T-Shirt", 19.99, "Clothing", 4)

ELECTRONICS = [LAPTOP, MOUSE]
MIXED = [GAMING_MOUSE_X3, T_SHIRT_X4]


def make_cart(items, rule: DiscountRule | None = None) -> Cart:
    """Create a cart holding the given items in order."""
    cart = Cart(rule)
    for item in items:
        cart.add_item(item)
    return cart
