"""Structured error taxonomy for rejected orders."""

from __future__ import annotations


class OrderPriceError(Exception):
    """Base class for all orderprice domain exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str, actionable: bool = True):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        self.actionable = actionable
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class InvalidOrderError(OrderPriceError, ValueError):
    def __init__(self, error_code: str, explanation: str):
        super().__init__(error_code, "ORDER", explanation, True)


class InvalidQuantityError(InvalidOrderError):
    def __init__(self, explanation: str):
        super().__init__("INVALID_QUANTITY", explanation)


class InvalidItemPriceError(InvalidOrderError):
    def __init__(self, explanation: str):
        super().__init__("INVALID_ITEM_PRICE", explanation)


class MissingOrderFieldError(InvalidOrderError):
    """Raised when an order-like input does not expose a required field."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__("MISSING_FIELD", f"Order is missing required field '{field_name}'")
