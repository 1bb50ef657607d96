"""Error types and error message constants for checkout discounts."""

from typing import Optional


class errmsg:
    """Error message constants for the discount core."""

    NAME_REQUIRED = "Item name is required"
    CATEGORY_REQUIRED = "Item category is required"
    PRICE_NEGATIVE = "Price cannot be negative"
    QUANTITY_POSITIVE = "Quantity must be positive"
    QUANTITY_INTEGER = "Quantity must be a whole number"
    ITEM_REQUIRED = "Item cannot be None"
    RULE_REQUIRED = "Discount rule cannot be None"
    PERCENTAGE_RANGE = "Percentage must be between 0 and 100"
    DISCOUNT_PERCENTAGE_RANGE = "Discount percentage must be between 0 and 100"
    MINIMUM_AMOUNT_NEGATIVE = "Minimum amount cannot be negative"
    DISCOUNT_AMOUNT_NEGATIVE = "Discount amount cannot be negative"
    MINIMUM_PURCHASE_NEGATIVE = "Minimum purchase amount cannot be negative"
    TAX_RATE_NEGATIVE = "Tax rate cannot be negative"
    TAX_RATE_INVALID = "Tax rate must be a number"
    UNKNOWN_RULE = "Unknown discount rule"


class DiscountError(Exception):
    """Base class for discount errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidArgumentError(DiscountError):
    """Invalid argument provided by caller."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid argument: {message}", cause)
