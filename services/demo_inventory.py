"""
Demo inventory for a freshly installed kiosk.

Seeding only happens when the engine holds no items right after construction,
so a restored inventory is never overwritten.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from domain.item import Item
from services.vending_machine import VendingMachine

logger = logging.getLogger(__name__)


def demo_items() -> List[Item]:
    return [
        Item(item_id="P001", name="Kopi Hitam", price=Decimal("10000"), stock=15, image_ref="/images/kopi.png"),
        Item(item_id="P002", name="Teh Manis", price=Decimal("8000"), stock=20, image_ref="/images/teh.png"),
        Item(item_id="P003", name="Air Mineral", price=Decimal("5000"), stock=25, image_ref="/images/air.png"),
        Item(item_id="P004", name="Susu", price=Decimal("12000"), stock=10, image_ref="/images/susu.png"),
        Item(item_id="P005", name="Jus", price=Decimal("15000"), stock=12, image_ref="/images/jus.png"),
        Item(item_id="P006", name="Soda", price=Decimal("9000"), stock=18, image_ref="/images/soda.png"),
    ]


def seed_if_empty(machine: VendingMachine) -> int:
    """
    Add the demo products if the machine has no items.

    Returns:
        Number of items added (0 if the machine already had inventory).
    """
    if machine.item_count() > 0:
        return 0

    items = demo_items()
    for item in items:
        machine.add_item(item)

    logger.info("Seeded %d demo items", len(items))
    return len(items)


__all__ = [
    "demo_items",
    "seed_if_empty",
]
