"""
Domain: Sale records.

Rules implemented here:
- A Sale captures one purchase: a snapshot of the item, the quantity and the
  instant it was created.
- Once created, identity and original fields never change. Only status moves,
  and only PENDING -> SUCCEEDED or PENDING -> CANCELLED; after that it is frozen.
- total = item.price * quantity.

Sales are immutable values; status transitions return a new instance.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterator

from .errors import InvalidInputError
from .item import ItemSnapshot
from .time import compact_millis, require_utc_timestamp

SALE_ID_PREFIX: str = "TRX"


class SaleStatus(str, Enum):
    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    CANCELLED = "CANCELLED"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class Sale:
    """
    Immutable record of a single purchase.

    All timestamps must be passed explicitly and be UTC.
    """

    sale_id: str
    item: ItemSnapshot
    quantity: int
    status: SaleStatus
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.sale_id:
            raise InvalidInputError("sale_id must not be empty")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise InvalidInputError("quantity must be a whole number >= 1")
        require_utc_timestamp("created_at", self.created_at)

    @staticmethod
    def pending(*, sale_id: str, item: ItemSnapshot, quantity: int, created_at: datetime) -> "Sale":
        return Sale(
            sale_id=sale_id,
            item=item,
            quantity=quantity,
            status=SaleStatus.PENDING,
            created_at=created_at,
        )

    @property
    def total(self) -> Decimal:
        return self.item.price * self.quantity

    @property
    def is_final(self) -> bool:
        return self.status is not SaleStatus.PENDING

    def succeeded(self) -> "Sale":
        """Return a copy of this sale marked SUCCEEDED."""

        return self._transition(SaleStatus.SUCCEEDED)

    def cancelled(self) -> "Sale":
        """Return a copy of this sale marked CANCELLED."""

        return self._transition(SaleStatus.CANCELLED)

    def _transition(self, status: SaleStatus) -> "Sale":
        if self.status is not SaleStatus.PENDING:
            raise ValueError(f"Sale {self.sale_id} is already {self.status.value}")
        return replace(self, status=status)


class SaleIdGenerator:
    """
    Produces sale IDs of the form TRX-<yyyyMMddHHmmssSSS>-<seq>.

    The sequence number is monotonic per generator, so two sales created in the
    same millisecond still get distinct IDs.
    """

    def __init__(self, prefix: str = SALE_ID_PREFIX, start: int = 1) -> None:
        self._prefix = prefix
        self._sequence: Iterator[int] = itertools.count(start)

    def next_id(self, created_at: datetime) -> str:
        return f"{self._prefix}-{compact_millis(created_at)}-{next(self._sequence):04d}"


Clock = Callable[[], datetime]

__all__ = [
    "SALE_ID_PREFIX",
    "Clock",
    "Sale",
    "SaleIdGenerator",
    "SaleStatus",
]
