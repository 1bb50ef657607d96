"""Tests for cart summary and checkout formatting."""

from checkout_discounts import (
    Cart,
    FixedAmountDiscount,
    LineItem,
    PercentageDiscount,
    format_cart_summary,
    format_checkout,
)

from fixtures import ELECTRONICS, make_cart


class TestCartSummary:
    def test_empty_cart(self):
        assert format_cart_summary(Cart()) == (
            "=== Shopping Cart Summary ===\n"
            "Cart is empty\n"
        )

    def test_lists_items_and_totals(self):
        cart = make_cart(ELECTRONICS, PercentageDiscount(10, 50))
        assert format_cart_summary(cart) == (
            "=== Shopping Cart Summary ===\n"
            "Items:\n"
            "  Laptop (Electronics) - $999.99 x 1 = $999.99\n"
            "  Mouse (Electronics) - $29.99 x 1 = $29.99\n"
            "\n"
            "Subtotal: $1029.98\n"
            "Discount Rule: 10% Off (Min $50.00)\n"
            "Discount: -$103.00\n"
            "Total: $926.98\n"
        )


class TestCheckout:
    def test_without_tax(self):
        cart = make_cart([LineItem("Desk", 200.0, "Home & Garden")], FixedAmountDiscount(15, 75))
        receipt = format_checkout(cart, customer="Jordan Lee")
        lines = receipt.split("\n")

        assert "Customer: Jordan Lee" in lines
        assert "Items: 1" in lines
        assert "Subtotal: $200.00" in lines
        assert "Discount: -$15.00" in lines
        assert "Rule: $15.00 Off (Min $75.00)" in lines
        assert "Total: $185.00" in lines
        assert not any(line.startswith("Tax") for line in lines)
        assert lines[-1] == "This is a demonstration. No actual payment will be processed."

    def test_with_tax(self):
        cart = make_cart([LineItem("Desk", 200.0, "Home & Garden")], PercentageDiscount(10))
        lines = format_checkout(cart, tax_rate=8.5).split("\n")

        assert "Customer: N/A" in lines
        assert "Tax (8.5%): $15.30" in lines
        assert "Total: $195.30" in lines
