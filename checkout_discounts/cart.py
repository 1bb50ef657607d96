"""Shopping cart that prices its items through a swappable discount rule."""

from typing import Optional

import structlog

from .errors import errmsg
from .line_item import LineItem
from .receipt import format_cart_summary
from .rules import DiscountRule, NoDiscount, items_subtotal
from .validation import require_non_negative, require_present

logger = structlog.get_logger()


class Cart:
    """Ordered line items plus the currently selected discount rule.

    Totals are derived from current state on every call, so swapping the
    rule is reflected immediately.
    """

    def __init__(self, rule: Optional[DiscountRule] = None) -> None:
        self._items: list[LineItem] = []
        self._rule: DiscountRule = rule if rule is not None else NoDiscount()

    @property
    def items(self) -> tuple[LineItem, ...]:
        """Snapshot of the cart's items in insertion order."""
        return tuple(self._items)

    @property
    def rule(self) -> DiscountRule:
        return self._rule

    def add_item(self, item: LineItem) -> None:
        require_present(item, errmsg.ITEM_REQUIRED)
        self._items.append(item)
        logger.info("item_added", name=item.name, quantity=item.quantity)

    def remove_item(self, item: LineItem) -> bool:
        """Remove the first item equal to ``item``; return whether one was found."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        logger.info("item_removed", name=item.name, quantity=item.quantity)
        return True

    def update_quantity(self, item: LineItem, quantity: int) -> bool:
        """Replace the first item equal to ``item`` with a new quantity."""
        updated = item.with_quantity(quantity)
        try:
            index = self._items.index(item)
        except ValueError:
            return False
        self._items[index] = updated
        logger.info(
            "quantity_updated",
            name=item.name,
            old_quantity=item.quantity,
            new_quantity=quantity,
        )
        return True

    def clear(self) -> None:
        self._items.clear()
        logger.info("cart_cleared")

    def set_rule(self, rule: DiscountRule) -> None:
        require_present(rule, errmsg.RULE_REQUIRED)
        previous = self._rule
        self._rule = rule
        logger.info("rule_changed", previous=previous.name(), current=rule.name())

    def subtotal(self) -> float:
        return items_subtotal(self._items)

    def discount(self) -> float:
        return self._rule.compute_discount(self.items)

    def total(self) -> float:
        """Subtotal less discount, never below zero."""
        return max(0.0, self.subtotal() - self.discount())

    def tax(self, rate: float) -> float:
        """Tax on the discounted total; ``rate`` is a percentage (8.5 for 8.5%).

        Raises InvalidArgumentError for a negative or non-finite rate, where
        the storefront this models would have applied it as-is.
        """
        require_non_negative(rate, errmsg.TAX_RATE_NEGATIVE)
        return self.total() * (rate / 100.0)

    def total_with_tax(self, rate: float) -> float:
        return self.total() + self.tax(rate)

    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def summary(self) -> str:
        return format_cart_summary(self)

    def __str__(self) -> str:
        return (
            f"Cart[items={self.item_count()}, subtotal=${self.subtotal():.2f}, "
            f"discount=${self.discount():.2f}, total=${self.total():.2f}]"
        )
