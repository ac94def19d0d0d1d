"""
Check inventory status - stock levels and items running low.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from repositories.item_store import JsonItemStore, LoadStatus
from repositories.store_config import load_store_config
from services.sales_report_service import format_rupiah, low_stock_items
from services.vending_machine import VendingMachine


def check_inventory_status(threshold: int = 5):
    """Print every product with its stock, then the ones at or below the threshold."""

    store = JsonItemStore(load_store_config())
    machine = VendingMachine(store)
    items = machine.list_items()

    print("=" * 60)
    print("INVENTORY STATUS")
    print("=" * 60)
    print(f"Store file:                {store.path}")
    print(f"Load status:               {machine.load_status.value}")
    if machine.load_status is LoadStatus.CORRUPT:
        print("[WARNING] Store file could not be read; showing empty inventory")
    print(f"Products:                  {len(items)}")
    print(f"Units in stock:            {sum(item.stock for item in items)}")
    print(f"Sold out:                  {sum(1 for item in items if not item.in_stock)}")
    print("=" * 60)

    print(f"\n{'ID':<8} {'Name':<20} {'Price':>14} {'Stock':>6}")
    print("-" * 60)
    for item in items:
        print(f"{item.item_id:<8} {item.name:<20} {format_rupiah(item.price):>14} {item.stock:>6}")
    print("-" * 60)

    low = low_stock_items(items, threshold)
    print(f"\nLow stock (<= {threshold}):")
    if not low:
        print("  none")
    for item in low:
        print(f"  {item.item_id} {item.name}: {item.stock} left")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Show kiosk inventory status")
    parser.add_argument("--threshold", type=int, default=5, help="Low-stock threshold (default: 5)")
    args = parser.parse_args()
    check_inventory_status(args.threshold)
