"""Typed data contracts for pricing inputs and results."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from numbers import Real
from typing import Any, Dict, Protocol, TypedDict, runtime_checkable


class OrderRecord(TypedDict):
    """Plain record shape accepted by ``Order.from_record`` and ``price``."""

    quantity: int
    itemPrice: Real


@runtime_checkable
class PricedOrder(Protocol):
    """Anything exposing the two fields the calculator reads."""

    quantity: int
    item_price: Real


@dataclass(frozen=True)
class PriceBreakdown:
    """Every intermediate term of one pricing calculation.

    Invariant:
    - ``total == base_price + shipping - discount``.
    - ``shipping`` never exceeds the shipping cap.
    - ``discount`` is zero unless ``quantity`` exceeds the discount threshold.
    """

    quantity: int
    item_price: Real
    base_price: Real
    shipping: Real
    discount: Real
    total: Real

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
