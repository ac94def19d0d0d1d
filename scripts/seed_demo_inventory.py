"""
Seed the demo product set into the kiosk inventory.

With --reset the existing store file is deleted first.
This is for development/demo purposes only.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from repositories.item_store import JsonItemStore
from repositories.store_config import load_store_config
from services.demo_inventory import seed_if_empty
from services.vending_machine import VendingMachine


def seed_demo_inventory(reset: bool = False):
    store = JsonItemStore(load_store_config())

    print("=" * 60)
    print("SEEDING DEMO INVENTORY")
    print("=" * 60)
    print(f"Store file: {store.path}")

    if reset:
        print("WARNING: Deleting the existing inventory file.")
        if store.delete():
            print("Existing inventory file removed.")
        else:
            print("No inventory file to remove.")

    machine = VendingMachine(store)
    added = seed_if_empty(machine)

    if added == 0:
        print(f"Inventory already has {machine.item_count()} products. Nothing seeded.")
        print("Use --reset to start from the demo set.")
        return

    if machine.last_save_ok:
        print(f"[SUCCESS] Seeded {added} demo products.")
    else:
        print(f"[WARNING] Seeded {added} demo products but the store file could not be written.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo products into the kiosk inventory")
    parser.add_argument("--reset", action="store_true", help="Delete the existing inventory file first")
    args = parser.parse_args()
    seed_demo_inventory(reset=args.reset)
