"""
Inventory and sales engine for the vending kiosk.

Handles:
- Product CRUD with unique IDs
- The purchase pipeline (validate, decrement stock, record sale)
- Writing the full product list back to the store after every mutation

The engine is the only owner of the product list and the sale history. Reads
hand out copies so callers cannot change engine state behind its back.

Not thread-safe: callers sharing one engine must serialize access themselves.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Union

from domain.errors import (
    DuplicateItemError,
    InvalidInputError,
    ItemNotFoundError,
    OutOfStockError,
    PersistenceError,
)
from domain.item import Item
from domain.sale import Clock, Sale, SaleIdGenerator
from domain.time import utc_now
from repositories.item_store import LoadResult, LoadStatus

logger = logging.getLogger(__name__)


class ItemStore(Protocol):
    def save(self, items: List[Item]) -> None: ...

    def load_result(self) -> LoadResult: ...


class VendingMachine:
    """Single authoritative owner of inventory and sale history."""

    def __init__(self, store: ItemStore, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock
        self._sale_ids = SaleIdGenerator()
        self._items: List[Item] = []
        self._sales: List[Sale] = []
        self._last_save_ok = True

        result = store.load_result()
        self._load_status = result.status
        if result.items:
            self._items = list(result.items)
            logger.info("Inventory loaded from store: %d items", len(self._items))
        elif result.status is LoadStatus.CORRUPT:
            logger.warning("Store could not be read (%s); starting with empty inventory", result.error)
        else:
            logger.info("No saved inventory; starting with empty inventory")

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def load_status(self) -> LoadStatus:
        """How the inventory was obtained at construction or the last reload()."""
        return self._load_status

    @property
    def last_save_ok(self) -> bool:
        """False if the most recent write to the store failed."""
        return self._last_save_ok

    def item_count(self) -> int:
        return len(self._items)

    def sale_count(self) -> int:
        return len(self._sales)

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def add_item(self, item: Item) -> bool:
        """
        Add a new product to the inventory.

        Returns:
            True if the change was persisted, False if the store write failed
            (the item is still added in memory).

        Raises:
            InvalidInputError: item is None or not an Item.
            DuplicateItemError: an item with the same ID already exists.
        """

        if not isinstance(item, Item):
            raise InvalidInputError("item must not be empty")
        if self._find_live(item.item_id) is not None:
            raise DuplicateItemError(item.item_id)

        self._items.append(item.copy())
        logger.info("Added item %s (%s)", item.item_id, item.name)
        return self._persist()

    def remove_item(self, item_id: str) -> bool:
        """
        Remove a product by ID.

        Returns False if no item has that ID. Past sales keep their snapshot.
        """

        item = self._find_live(item_id)
        if item is None:
            return False

        self._items.remove(item)
        logger.info("Removed item %s", item_id)
        self._persist()
        return True

    def update_item(self, item_id: str, new_data: Item) -> bool:
        """
        Overwrite name, price, stock and image reference of an existing item.

        The ID is the identity key and cannot be changed through an update.

        Returns:
            True if the change was persisted, False if the store write failed.

        Raises:
            InvalidInputError: new_data is missing or tries to change the ID.
            ItemNotFoundError: no item has item_id.
        """

        if not isinstance(new_data, Item):
            raise InvalidInputError("new item data must not be empty")
        # Fields may have been reassigned since construction; copy() re-validates.
        new_data = new_data.copy()

        item = self._find_live(item_id)
        if item is None:
            raise ItemNotFoundError(str(item_id))
        if new_data.item_id != item.item_id:
            raise InvalidInputError("item_id cannot be changed by an update")

        item.overwrite_from(new_data)
        logger.info("Updated item %s", item_id)
        return self._persist()

    def find_item(self, item_id: Optional[str]) -> Optional[Item]:
        """Return a copy of the item with this exact ID, or None."""

        item = self._find_live(item_id)
        return item.copy() if item is not None else None

    def list_items(self) -> List[Item]:
        """Return copies of all items in insertion order."""

        return [item.copy() for item in self._items]

    def reload(self) -> LoadStatus:
        """
        Replace the in-memory inventory with what the store holds.

        Sale history is left untouched.
        """

        result = self._store.load_result()
        self._items = list(result.items)
        self._load_status = result.status
        logger.info("Inventory reloaded (%s): %d items", result.status.value, len(self._items))
        return result.status

    # ------------------------------------------------------------------
    # Purchases and sale history
    # ------------------------------------------------------------------

    def purchase(self, item: Union[Item, str]) -> Sale:
        """
        Sell one unit of an item.

        The caller's item may be stale, so it is re-resolved by ID against the
        live inventory before anything changes.

        Process:
        1. Reject a missing input
        2. Resolve the item by ID
        3. Reject if nothing is left in stock
        4. Decrement stock by exactly one
        5. Record a SUCCEEDED sale holding a snapshot of the item
        6. Persist the inventory

        Returns:
            The recorded Sale.

        Raises:
            InvalidInputError: item is None or empty.
            ItemNotFoundError: the item is not in the inventory.
            OutOfStockError: the item has no stock left.
        """

        if item is None or item == "":
            raise InvalidInputError("item must not be empty")

        item_id = item.item_id if isinstance(item, Item) else str(item)
        live = self._find_live(item_id)
        if live is None:
            raise ItemNotFoundError(item_id)
        if live.stock <= 0:
            raise OutOfStockError(live.item_id, live.name)

        created_at = self._clock()
        pending = Sale.pending(
            sale_id=self._sale_ids.next_id(created_at),
            item=live.snapshot(),
            quantity=1,
            created_at=created_at,
        )

        # Nothing below may run if the decrement fails.
        live.decrement_stock(pending.quantity)
        sale = pending.succeeded()
        self._sales.append(sale)

        logger.info("Sale %s: %s, stock now %d", sale.sale_id, live.item_id, live.stock)
        self._persist()
        return sale

    def list_sales(self) -> List[Sale]:
        """Return all sales in the order they happened."""

        return list(self._sales)

    def find_sale(self, sale_id: str) -> Optional[Sale]:
        for sale in self._sales:
            if sale.sale_id == sale_id:
                return sale
        return None

    def clear_sale_history(self) -> None:
        """Drop all sale records. Inventory and its file are not touched."""

        cleared = len(self._sales)
        self._sales.clear()
        logger.info("Cleared %d sales from history", cleared)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find_live(self, item_id: Optional[str]) -> Optional[Item]:
        if item_id is None:
            return None
        for item in self._items:
            if item.item_id == item_id:
                return item
        return None

    def _persist(self) -> bool:
        # Memory is already changed; a failed write is reported, not rolled back.
        try:
            self._store.save(list(self._items))
        except PersistenceError as e:
            logger.warning("Inventory change kept in memory but not saved: %s", e.detail)
            self._last_save_ok = False
            return False
        self._last_save_ok = True
        return True


__all__ = [
    "ItemStore",
    "VendingMachine",
]
