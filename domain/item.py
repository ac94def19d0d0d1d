"""
Domain: Item (a sellable product and its stock counter).

Rules implemented here:
- item_id is a non-empty string and is the identity key used for lookups.
- name is a non-empty string.
- price is a Decimal >= 0 (never a binary float).
- stock is a whole number >= 0 at all times; any change that would drive it
  negative fails.
- image_ref is an opaque pointer to a display asset and is never resolved here.

Items are mutable in place (stock decrements, admin updates). Anything that must
not change afterwards takes an ItemSnapshot instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import InvalidInputError, OutOfStockError


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{name} must not be empty")
    return value


def _coerce_price(value: Any) -> Decimal:
    """
    Convert a price input into a Decimal.

    Accepts Decimal, int, float (via its string form) and numeric strings.
    Rejects bools, NaN/infinity and negative amounts.
    """

    if isinstance(value, bool) or value is None:
        raise InvalidInputError("price must be a number")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInputError("price must be a number") from None
    else:
        raise InvalidInputError("price must be a number")

    if not amount.is_finite():
        raise InvalidInputError("price must be a finite number")
    if amount < 0:
        raise InvalidInputError("price must be >= 0")
    return amount


def _require_stock(value: Any) -> int:
    # bool is an int subclass; True is not a stock level.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError("stock must be a whole number")
    if value < 0:
        raise InvalidInputError("stock must be >= 0")
    return value


@dataclass(frozen=True, slots=True)
class ItemSnapshot:
    """
    Immutable value copy of an Item taken when a sale is created.

    Later price/name edits or stock decrements on the live Item do not reach
    the snapshot.
    """

    item_id: str
    name: str
    price: Decimal
    image_ref: str = ""


@dataclass(slots=True)
class Item:
    """A product offered by the kiosk."""

    item_id: str
    name: str
    price: Decimal
    stock: int
    image_ref: str = ""

    def __post_init__(self) -> None:
        self.item_id = _require_text("item_id", self.item_id)
        self.name = _require_text("name", self.name)
        self.price = _coerce_price(self.price)
        self.stock = _require_stock(self.stock)
        if self.image_ref is None:
            self.image_ref = ""
        elif not isinstance(self.image_ref, str):
            raise InvalidInputError("image_ref must be a string")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def decrement_stock(self, quantity: int = 1) -> None:
        """
        Remove `quantity` units from stock.

        Raises:
            InvalidInputError: quantity is not a whole number >= 1.
            OutOfStockError: quantity exceeds the stock on hand.
        """

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidInputError("quantity must be a whole number >= 1")
        if quantity > self.stock:
            raise OutOfStockError(self.item_id, self.name)
        self.stock -= quantity

    def overwrite_from(self, other: "Item") -> None:
        """Copy every descriptive field and the stock level from `other`, keeping this ID."""

        self.name = other.name
        self.price = other.price
        self.stock = other.stock
        self.image_ref = other.image_ref

    def copy(self) -> "Item":
        return replace(self)

    def snapshot(self) -> ItemSnapshot:
        return ItemSnapshot(
            item_id=self.item_id,
            name=self.name,
            price=self.price,
            image_ref=self.image_ref,
        )


__all__ = [
    "Item",
    "ItemSnapshot",
]
