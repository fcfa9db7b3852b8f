"""Order pricing: base price plus capped shipping minus volume discount."""

__version__ = "0.1.0"

from .errors import InvalidOrderError, MissingOrderFieldError, OrderPriceError
from .order import Order
from .pricing import price, price_breakdown
from .types import OrderRecord, PriceBreakdown, PricedOrder

__all__ = [
    "InvalidOrderError",
    "MissingOrderFieldError",
    "Order",
    "OrderPriceError",
    "OrderRecord",
    "PriceBreakdown",
    "PricedOrder",
    "__version__",
    "price",
    "price_breakdown",
]
