"""Cart summary and checkout formatting utilities."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .cart import Cart


def format_cart_summary(cart: "Cart") -> str:
    """Format the multi-line cart summary."""
    lines = ["=== Shopping Cart Summary ==="]

    if cart.is_empty():
        lines.append("Cart is empty")
        return "\n".join(lines) + "\n"

    lines.append("Items:")
    for item in cart.items:
        lines.append(f"  {item}")

    lines.append("")
    lines.append(f"Subtotal: ${cart.subtotal():.2f}")
    lines.append(f"Discount Rule: {cart.rule.name()}")
    lines.append(f"Discount: -${cart.discount():.2f}")
    lines.append(f"Total: ${cart.total():.2f}")

    return "\n".join(lines) + "\n"


def format_checkout(
    cart: "Cart",
    customer: Optional[str] = None,
    tax_rate: float = 0.0,
) -> str:
    """Format a human-readable order summary for checkout."""
    lines = []

    lines.append("=" * 40)
    lines.append("           ORDER SUMMARY")
    lines.append("=" * 40)
    lines.append(f"Customer: {customer}" if customer else "Customer: N/A")
    lines.append(f"Items: {cart.item_count()}")
    lines.append("-" * 40)
    lines.append(f"Subtotal: ${cart.subtotal():.2f}")
    lines.append(f"Discount: -${cart.discount():.2f}")
    lines.append(f"Rule: {cart.rule.name()}")

    if tax_rate > 0:
        lines.append(f"Tax ({tax_rate:g}%): ${cart.tax(tax_rate):.2f}")

    lines.append("-" * 40)
    lines.append(f"Total: ${cart.total_with_tax(tax_rate):.2f}")
    lines.append("=" * 40)
    lines.append("This is a demonstration. No actual payment will be processed.")

    return "\n".join(lines)
