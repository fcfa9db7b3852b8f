from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from .pricing import price, price_breakdown, read_order_fields, validate_item_price, validate_quantity
from .types import OrderRecord, PriceBreakdown

__all__ = ["Order"]


@dataclass(frozen=True)
class Order:
    """Immutable order value exposing its total as a derived attribute."""

    quantity: int
    item_price: Real

    def __post_init__(self) -> None:
        validate_quantity(self.quantity)
        validate_item_price(self.item_price)

    @classmethod
    def from_record(cls, record: OrderRecord) -> "Order":
        """Build an order from a ``{"quantity", "itemPrice"}`` record."""
        quantity, item_price = read_order_fields(record)
        return cls(quantity=quantity, item_price=item_price)

    @property
    def price(self) -> Real:
        return price(self)

    @property
    def breakdown(self) -> PriceBreakdown:
        return price_breakdown(self)
