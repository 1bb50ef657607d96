"""Walk through the discount rules against sample carts.

Shows the same cart priced under different rules, minimum-purchase gating,
buy-one-get-one variants and the storefront's rule catalog.
"""

import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace
from typing import Callable, Optional

import structlog

from .cart import Cart
from .catalog import default_rules, sample_products
from .config import Settings, configure_logging, load_settings
from .errors import DiscountError, errmsg
from .line_item import LineItem
from .receipt import format_checkout
from .rules import (
    BuyOneGetOneDiscount,
    DiscountRule,
    FixedAmountDiscount,
    NoDiscount,
    PercentageDiscount,
)
from .validation import require_non_negative

logger = structlog.get_logger()

WIDTH = 80


def money(amount: float) -> str:
    return f"${amount:,.2f}"


def heading(title: str) -> None:
    print()
    print(title)
    print("-" * 50)


def cart_of(items: Sequence[LineItem], rule: Optional[DiscountRule] = None) -> Cart:
    cart = Cart(rule)
    for item in items:
        cart.add_item(item)
    return cart


def print_rule_rows(cart: Cart, rules: Sequence[DiscountRule], label_width: int = 30) -> None:
    for rule in rules:
        cart.set_rule(rule)
        print(
            f"{rule.name():<{label_width}} | Discount: {money(cart.discount()):>9} "
            f"| Total: {money(cart.total()):>10}"
        )


def show_switching(settings: Settings) -> None:
    heading("1. RULE SWITCHING")
    cart = cart_of([
        LineItem("Gaming Laptop", 999.99, "Electronics"),
        LineItem("Wireless Mouse", 29.99, "Electronics"),
        LineItem("Cotton T-Shirt", 24.99, "Clothing"),
    ])
    print(f"Cart subtotal: {money(cart.subtotal())}")
    print_rule_rows(cart, [
        NoDiscount(),
        PercentageDiscount(10),
        PercentageDiscount(15, 50),
        FixedAmountDiscount(25),
        BuyOneGetOneDiscount("Electronics"),
    ])
    if settings.tax_rate > 0:
        print(
            f"With {settings.tax_rate:g}% tax: "
            f"{money(cart.total_with_tax(settings.tax_rate))}"
        )


def show_scenarios(_settings: Settings) -> None:
    heading("2. SCENARIOS")
    scenarios = [
        ("Small Order (<$50)",
         [LineItem("Book", 15.99, "Books")],
         PercentageDiscount(10, 50)),
        ("Medium Order ($50-$100)",
         [LineItem("Headphones", 79.99, "Electronics"),
          LineItem("Phone Case", 19.99, "Electronics")],
         PercentageDiscount(10, 50)),
        ("Large Order (>$100)",
         [LineItem("Gaming Laptop", 999.99, "Electronics"),
          LineItem("External Monitor", 299.99, "Electronics")],
         PercentageDiscount(20, 100)),
        ("Fixed Discount > Order Total",
         [LineItem("Pen", 2.99, "Office")],
         FixedAmountDiscount(10)),
    ]
    for title, items, rule in scenarios:
        cart = cart_of(items, rule)
        print(
            f"{title:<30} | Subtotal: {money(cart.subtotal()):>10} "
            f"| Discount: {money(cart.discount()):>9} | Total: {money(cart.total()):>10}"
        )


def show_bogo(_settings: Settings) -> None:
    heading("3. BUY ONE GET ONE")
    cart = cart_of([
        LineItem("Gaming Mouse", 49.99, "Electronics", 3),
        LineItem("T-Shirt", 19.99, "Clothing", 4),
    ])
    print(f"Cart: 3x Gaming Mouse ($49.99) + 4x T-Shirt ($19.99) = {money(cart.subtotal())}")
    print_rule_rows(cart, [
        BuyOneGetOneDiscount(),
        BuyOneGetOneDiscount("Electronics"),
        BuyOneGetOneDiscount("Clothing", 50),
        BuyOneGetOneDiscount("Books"),
    ], label_width=40)


def show_minimums(_settings: Settings) -> None:
    heading("4. MINIMUM PURCHASE REQUIREMENTS")
    cart = cart_of([
        LineItem("Smartphone", 699.99, "Electronics"),
        LineItem("Phone Case", 24.99, "Electronics"),
    ])
    print(f"Cart subtotal: {money(cart.subtotal())}")
    for rule in [
        PercentageDiscount(15, 500),
        PercentageDiscount(20, 800),
        FixedAmountDiscount(50, 600),
        FixedAmountDiscount(100, 1000),
    ]:
        cart.set_rule(rule)
        qualifies = cart.discount() > 0
        print(
            f"{rule.name():<30} | Qualifies: {str(qualifies):<5} "
            f"| Discount: {money(cart.discount()):>9} | Total: {money(cart.total()):>10}"
        )


def show_catalog(settings: Settings) -> None:
    heading("5. STOREFRONT CATALOG")
    cart = cart_of(sample_products())
    print(f"All sample products, {cart.item_count()} items: {money(cart.subtotal())}")
    rules = default_rules()
    for rule in rules:
        print(f"{rule.name():<40} {rule.description()}")
    best = max(rules, key=lambda rule: rule.compute_discount(cart.items))
    cart.set_rule(best)
    print()
    print(format_checkout(cart, customer=settings.customer, tax_rate=settings.tax_rate))


SECTIONS: dict[str, Callable[[Settings], None]] = {
    "switching": show_switching,
    "scenarios": show_scenarios,
    "bogo": show_bogo,
    "minimums": show_minimums,
    "catalog": show_catalog,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Price sample carts under each discount rule"
    )
    parser.add_argument(
        "sections",
        nargs="*",
        metavar="SECTION",
        help=f"Sections to show: {', '.join(SECTIONS)} (default: all)",
    )
    parser.add_argument(
        "--tax-rate",
        type=float,
        default=None,
        help="Tax percentage applied at checkout (default: $CHECKOUT_TAX_RATE or 0)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level (default: $CHECKOUT_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    unknown = [s for s in args.sections if s not in SECTIONS]
    if unknown:
        parser.error(f"unknown section(s): {', '.join(unknown)}")

    try:
        settings = load_settings()
        if args.tax_rate is not None:
            require_non_negative(args.tax_rate, errmsg.TAX_RATE_NEGATIVE)
            settings = replace(settings, tax_rate=args.tax_rate)
    except DiscountError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(args.log_level or settings.log_level)

    print("=" * WIDTH)
    print("CHECKOUT DISCOUNT RULES")
    print("=" * WIDTH)

    try:
        for section in args.sections or list(SECTIONS):
            logger.debug("section_started", section=section)
            SECTIONS[section](settings)
    except DiscountError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print()
    print("=" * WIDTH)
    return 0


if __name__ == "__main__":
    sys.exit(main())
