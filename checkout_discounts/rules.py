"""Discount rules: interchangeable pricing algorithms over cart line items.

Every rule implements the same contract, so a cart can swap rules at any
time without knowing which variant it holds:

    compute_discount(items) -> amount to subtract from the subtotal
    name()                  -> short display name
    description()           -> one-line explanation for customers

Rules are immutable and validate their parameters at construction.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .errors import errmsg
from .line_item import LineItem
from .validation import require_non_negative, require_percentage


def items_subtotal(items: Sequence[LineItem]) -> float:
    """Sum of line totals."""
    return sum((item.line_total() for item in items), 0.0)


def _whole(value: float) -> str:
    """Render a percentage as a whole number, rounding half up."""
    return str(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class DiscountRule(ABC):
    """Base class for discount rules."""

    @abstractmethod
    def compute_discount(self, items: Sequence[LineItem]) -> float:
        """Return the discount amount for the given items."""

    @abstractmethod
    def name(self) -> str:
        """Return the display name."""

    @abstractmethod
    def description(self) -> str:
        """Return a customer-facing description."""

    def __str__(self) -> str:
        return self.name()


@dataclass(frozen=True)
class NoDiscount(DiscountRule):
    """Applies no discount. The default rule for a new cart."""

    def compute_discount(self, items: Sequence[LineItem]) -> float:
        return 0.0

    def name(self) -> str:
        return "No Discount"

    def description(self) -> str:
        return "No discount is applied to the total amount."


@dataclass(frozen=True)
class PercentageDiscount(DiscountRule):
    """Percentage off the whole order once the subtotal reaches a minimum."""

    percentage: float
    minimum_amount: float = 0.0

    def __post_init__(self) -> None:
        require_percentage(self.percentage, errmsg.PERCENTAGE_RANGE)
        require_non_negative(self.minimum_amount, errmsg.MINIMUM_AMOUNT_NEGATIVE)

    def compute_discount(self, items: Sequence[LineItem]) -> float:
        subtotal = items_subtotal(items)
        if subtotal >= self.minimum_amount:
            return subtotal * (self.percentage / 100.0)
        return 0.0

    def name(self) -> str:
        if self.minimum_amount > 0:
            return f"{_whole(self.percentage)}% Off (Min ${self.minimum_amount:.2f})"
        return f"{_whole(self.percentage)}% Off"

    def description(self) -> str:
        if self.minimum_amount > 0:
            return (
                f"Get {_whole(self.percentage)}% discount on orders over "
                f"${self.minimum_amount:.2f}"
            )
        return f"Get {_whole(self.percentage)}% discount on your entire order"


@dataclass(frozen=True)
class FixedAmountDiscount(DiscountRule):
    """Fixed amount off once the subtotal reaches a minimum.

    The discount never exceeds the subtotal it is taken from.
    """

    discount_amount: float
    minimum_purchase: float = 0.0

    def __post_init__(self) -> None:
        require_non_negative(self.discount_amount, errmsg.DISCOUNT_AMOUNT_NEGATIVE)
        require_non_negative(self.minimum_purchase, errmsg.MINIMUM_PURCHASE_NEGATIVE)

    def compute_discount(self, items: Sequence[LineItem]) -> float:
        subtotal = items_subtotal(items)
        if subtotal >= self.minimum_purchase:
            return min(self.discount_amount, subtotal)
        return 0.0

    def name(self) -> str:
        if self.minimum_purchase > 0:
            return f"${self.discount_amount:.2f} Off (Min ${self.minimum_purchase:.2f})"
        return f"${self.discount_amount:.2f} Off"

    def description(self) -> str:
        if self.minimum_purchase > 0:
            return (
                f"Save ${self.discount_amount:.2f} on orders over "
                f"${self.minimum_purchase:.2f}"
            )
        return f"Save ${self.discount_amount:.2f} on your order"


@dataclass(frozen=True)
class BuyOneGetOneDiscount(DiscountRule):
    """Buy one, get the second at a discount.

    Items in the target category (every category when None) are grouped by
    name. Each complete pair in a group earns discount_percentage off one
    unit, priced at the first item seen in that group.
    """

    target_category: Optional[str] = None
    discount_percentage: float = 100.0

    def __post_init__(self) -> None:
        require_percentage(self.discount_percentage, errmsg.DISCOUNT_PERCENTAGE_RANGE)

    def _eligible(self, item: LineItem) -> bool:
        return self.target_category is None or item.category == self.target_category

    def compute_discount(self, items: Sequence[LineItem]) -> float:
        # name -> (unit price of first item seen, total quantity)
        groups: dict[str, tuple[float, int]] = {}
        for item in items:
            if not self._eligible(item):
                continue
            price, quantity = groups.get(item.name, (item.unit_price, 0))
            groups[item.name] = (price, quantity + item.quantity)

        total = 0.0
        for price, quantity in groups.values():
            pairs = quantity // 2
            total += pairs * (price * (self.discount_percentage / 100.0))
        return total

    def name(self) -> str:
        suffix = f" ({self.target_category})" if self.target_category is not None else ""
        if self.discount_percentage == 100.0:
            return f"Buy One Get One Free{suffix}"
        if self.discount_percentage == 50.0:
            return f"Buy One Get One 50% Off{suffix}"
        return f"Buy One Get One {_whole(self.discount_percentage)}% Off{suffix}"

    def description(self) -> str:
        suffix = (
            f" in {self.target_category} category"
            if self.target_category is not None
            else ""
        )
        if self.discount_percentage == 100.0:
            return f"Buy one item and get another one free{suffix}"
        return (
            f"Buy one item and get {_whole(self.discount_percentage)}% off "
            f"the second item{suffix}"
        )
