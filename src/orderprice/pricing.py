"""Pricing calculator: base price, capped shipping and volume discount."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Integral, Real
from typing import Any, Tuple, Union

from .errors import InvalidItemPriceError, InvalidQuantityError, MissingOrderFieldError
from .types import OrderRecord, PriceBreakdown, PricedOrder

logger = logging.getLogger(__name__)

__all__ = [
    "DISCOUNT_RATE",
    "DISCOUNT_THRESHOLD",
    "SHIPPING_CAP",
    "SHIPPING_RATE",
    "price",
    "price_breakdown",
    "read_order_fields",
    "validate_quantity",
    "validate_item_price",
]

SHIPPING_RATE = 0.10
SHIPPING_CAP = 100
DISCOUNT_THRESHOLD = 500
DISCOUNT_RATE = 0.05

_ITEM_PRICE_KEYS = ("itemPrice", "item_price")


def validate_quantity(quantity: Any) -> int:
    """Return ``quantity`` unchanged if it is a non-negative integer.

    Raises:
        InvalidQuantityError: for booleans, non-integers and negative values.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, Integral):
        logger.debug("Rejected quantity %r of type %s", quantity, type(quantity).__name__)
        raise InvalidQuantityError(f"quantity must be an integer, got {type(quantity).__name__}")
    if quantity < 0:
        logger.debug("Rejected negative quantity %r", quantity)
        raise InvalidQuantityError(f"quantity must be non-negative, got {quantity}")
    return quantity


def validate_item_price(item_price: Any) -> Real:
    """Return ``item_price`` unchanged if it is a finite, non-negative real number.

    Raises:
        InvalidItemPriceError: for booleans, non-numbers, NaN, infinities and negative values.
    """
    if isinstance(item_price, bool) or not isinstance(item_price, Real):
        logger.debug("Rejected item price %r of type %s", item_price, type(item_price).__name__)
        raise InvalidItemPriceError(f"item price must be a real number, got {type(item_price).__name__}")
    if not math.isfinite(item_price):
        logger.debug("Rejected non-finite item price %r", item_price)
        raise InvalidItemPriceError(f"item price must be finite, got {item_price}")
    if item_price < 0:
        logger.debug("Rejected negative item price %r", item_price)
        raise InvalidItemPriceError(f"item price must be non-negative, got {item_price}")
    return item_price


def read_order_fields(order: Union[OrderRecord, PricedOrder]) -> Tuple[Any, Any]:
    """Pull quantity and item price from a mapping record or an attribute-bearing object."""
    if isinstance(order, Mapping):
        if "quantity" not in order:
            raise MissingOrderFieldError("quantity")
        for key in _ITEM_PRICE_KEYS:
            if key in order:
                return order["quantity"], order[key]
        raise MissingOrderFieldError("itemPrice")

    if not hasattr(order, "quantity"):
        raise MissingOrderFieldError("quantity")
    for key in _ITEM_PRICE_KEYS:
        if hasattr(order, key):
            return order.quantity, getattr(order, key)
    raise MissingOrderFieldError("itemPrice")


def price_breakdown(order: Union[OrderRecord, PricedOrder]) -> PriceBreakdown:
    """Compute every term of the order total.

    ``order`` is either a mapping or any object exposing ``quantity`` and
    ``itemPrice`` (or ``item_price``) as keys or attributes.

    Raises:
        InvalidOrderError: if a field is missing or outside the numeric domain.
    """
    raw_quantity, raw_item_price = read_order_fields(order)
    quantity = validate_quantity(raw_quantity)
    item_price = validate_item_price(raw_item_price)

    try:
        base_price = quantity * item_price
        shipping = min(base_price * SHIPPING_RATE, SHIPPING_CAP)
        if quantity > DISCOUNT_THRESHOLD:
            discount = (quantity - DISCOUNT_THRESHOLD) * item_price * DISCOUNT_RATE
        else:
            discount = 0
        total = base_price + shipping - discount
    except OverflowError as exc:
        logger.debug("Rejected quantity of %d bits: total overflows a float", int(quantity).bit_length())
        raise InvalidQuantityError("quantity is too large to price") from exc

    logger.debug(
        "Priced order quantity=%s item_price=%s base=%s shipping=%s discount=%s total=%s",
        quantity,
        item_price,
        base_price,
        shipping,
        discount,
        total,
    )
    return PriceBreakdown(
        quantity=quantity,
        item_price=item_price,
        base_price=base_price,
        shipping=shipping,
        discount=discount,
        total=total,
    )


def price(order: Union[OrderRecord, PricedOrder]) -> Real:
    """Total charge for one order: base price plus shipping minus discount."""
    return price_breakdown(order).total
