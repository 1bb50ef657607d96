"""Cart line items."""

from dataclasses import dataclass, replace

from .errors import errmsg
from .validation import require_int, require_non_negative, require_positive, require_text


@dataclass(frozen=True)
class LineItem:
    """One product entry in a cart: a priced, categorized quantity."""

    name: str
    unit_price: float
    category: str
    quantity: int = 1

    def __post_init__(self) -> None:
        require_text(self.name, errmsg.NAME_REQUIRED)
        require_text(self.category, errmsg.CATEGORY_REQUIRED)
        require_non_negative(self.unit_price, errmsg.PRICE_NEGATIVE)
        require_int(self.quantity, errmsg.QUANTITY_INTEGER)
        require_positive(self.quantity, errmsg.QUANTITY_POSITIVE)

    def line_total(self) -> float:
        return self.unit_price * self.quantity

    def with_quantity(self, quantity: int) -> "LineItem":
        """Return a copy of this item with a different quantity."""
        return replace(self, quantity=quantity)

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.category}) - ${self.unit_price:.2f} "
            f"x {self.quantity} = ${self.line_total():.2f}"
        )
