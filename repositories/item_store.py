"""
Item store (persistence).

This module provides *only* persistence operations for the Item domain entity.
It does not enforce business rules (e.g., stock rules, purchase flow); it only
writes and reads the full product list as one JSON document.

Contract:
- save() replaces the whole file atomically (write temp file, then rename); a
  half-written file is never what the next load() sees.
- load() never raises. A missing file yields an empty list; an unreadable or
  corrupt file is logged and also yields an empty list. load_result() exposes
  which of those happened.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from domain.errors import PersistenceError
from domain.item import Item
from repositories.store_config import StoreConfig

logger = logging.getLogger(__name__)

# Bump when the document layout changes.
_FORMAT_VERSION: int = 1


class LoadStatus(str, Enum):
    MISSING = "MISSING"
    LOADED = "LOADED"
    CORRUPT = "CORRUPT"


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of reading the store: the items plus how they were obtained."""

    status: LoadStatus
    items: List[Item] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def fell_back(self) -> bool:
        """True when a store file existed but could not be used."""
        return self.status is LoadStatus.CORRUPT


def _item_to_row(item: Item) -> dict[str, Any]:
    """Convert an Item into a JSON-safe mapping (price kept as a string)."""

    return {
        "item_id": item.item_id,
        "name": item.name,
        "price": str(item.price),
        "stock": item.stock,
        "image_ref": item.image_ref,
    }


def _row_to_item(row: Mapping[str, Any]) -> Item:
    """Convert a stored mapping back into an Item."""

    # Text fields pass through untouched so Item rejects non-strings.
    return Item(
        item_id=row["item_id"],
        name=row["name"],
        price=Decimal(str(row["price"])),
        stock=row["stock"],
        image_ref=row.get("image_ref", ""),
    )


def _rows_from_document(document: Any) -> List[Mapping[str, Any]]:
    # Older stores may hold a bare list of rows.
    if isinstance(document, list):
        return document
    if isinstance(document, dict) and isinstance(document.get("items"), list):
        return document["items"]
    raise ValueError("store document has no item list")


class JsonItemStore:
    """File-backed store for the product list."""

    def __init__(self, config: StoreConfig) -> None:
        self._config = config

    @property
    def path(self) -> Path:
        return self._config.path

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, items: Iterable[Item]) -> None:
        """
        Overwrite the store with the given items.

        Raises:
            PersistenceError: If the directory or file cannot be written.
        """

        document = {
            "version": _FORMAT_VERSION,
            "items": [_item_to_row(item) for item in items],
        }

        tmp_path: Optional[Path] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                delete=False,
                encoding="utf-8",
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                json.dump(document, tmp, ensure_ascii=False, indent=2)
                tmp.flush()
                os.fsync(tmp.fileno())
            tmp_path.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            logger.error("Failed to save inventory to %s: %s", self.path, e)
            raise PersistenceError(str(e)) from e

        logger.info("Saved %d items to %s", len(document["items"]), self.path)

    def load_result(self) -> LoadResult:
        """Read the store, reporting whether the file was missing, loaded or corrupt."""

        if not self.exists():
            logger.info("No inventory file at %s; starting empty", self.path)
            return LoadResult(status=LoadStatus.MISSING)

        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
            items = [_row_to_item(row) for row in _rows_from_document(document)]
            ids = [item.item_id for item in items]
            if len(set(ids)) != len(ids):
                raise ValueError("store contains duplicate item IDs")
        except (OSError, KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.warning("Could not load inventory from %s, starting empty: %s", self.path, e)
            return LoadResult(status=LoadStatus.CORRUPT, error=str(e))

        logger.info("Loaded %d items from %s", len(items), self.path)
        return LoadResult(status=LoadStatus.LOADED, items=items)

    def load(self) -> List[Item]:
        return self.load_result().items

    def delete(self) -> bool:
        """Remove the store file. Returns False if there was nothing to remove or it failed."""

        if not self.exists():
            return False
        try:
            self.path.unlink()
        except OSError as e:
            logger.error("Failed to delete inventory file %s: %s", self.path, e)
            return False
        return True


__all__ = [
    "JsonItemStore",
    "LoadResult",
    "LoadStatus",
]
