"""
Domain error codes and exceptions for the vending kiosk core.

Every error carries a stable machine code and a user-safe message. Messages
never include stack detail or internal state, so front ends can show them
as-is.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    DUPLICATE_ID = "DUPLICATE_ID"
    NOT_FOUND = "NOT_FOUND"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    IO_FAILURE = "IO_FAILURE"


class VendingError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode = ErrorCode.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(VendingError, ValueError):
    """Raised when a required field is missing or a value is out of range."""

    code = ErrorCode.INVALID_INPUT


class DuplicateItemError(VendingError):
    """Raised when adding an item whose ID is already in the inventory."""

    code = ErrorCode.DUPLICATE_ID

    def __init__(self, item_id: str) -> None:
        super().__init__(f"An item with ID '{item_id}' already exists")
        self.item_id = item_id


class ItemNotFoundError(VendingError):
    """Raised when an operation references an item ID absent from the inventory."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item '{item_id}' was not found")
        self.item_id = item_id


class SaleNotFoundError(VendingError):
    """Raised when a sale ID is absent from the sale history."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, sale_id: str) -> None:
        super().__init__(f"Sale '{sale_id}' was not found")
        self.sale_id = sale_id


class OutOfStockError(VendingError):
    """Raised when purchasing an item with no stock left."""

    code = ErrorCode.OUT_OF_STOCK

    def __init__(self, item_id: str, name: str) -> None:
        super().__init__(f"'{name}' is out of stock")
        self.item_id = item_id


class PersistenceError(VendingError):
    """Raised by the store when the inventory file cannot be written."""

    code = ErrorCode.IO_FAILURE

    def __init__(self, detail: str) -> None:
        super().__init__("Inventory could not be saved")
        self.detail = detail


__all__ = [
    "ErrorCode",
    "VendingError",
    "InvalidInputError",
    "DuplicateItemError",
    "ItemNotFoundError",
    "SaleNotFoundError",
    "OutOfStockError",
    "PersistenceError",
]
