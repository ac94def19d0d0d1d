"""
Shared engine instance for the API.

FastAPI runs plain `def` handlers in a worker pool, but the engine is
single-writer. Every handler therefore holds `machine_lock` for the whole
validate-mutate-persist sequence.

Environment variables:
- VENDING_SEED_DEMO: Seed demo products into an empty inventory (default: 1)
"""

from __future__ import annotations

import os
import threading
from typing import Optional

from repositories.item_store import JsonItemStore
from repositories.store_config import load_store_config
from services.demo_inventory import seed_if_empty
from services.vending_machine import VendingMachine

machine_lock = threading.Lock()

_machine: Optional[VendingMachine] = None


def _seed_demo_enabled() -> bool:
    return os.getenv("VENDING_SEED_DEMO", "1").strip().lower() not in {"0", "false", "no", "off"}


def get_machine() -> VendingMachine:
    """Return the process-wide engine, creating (and optionally seeding) it on first use."""
    global _machine

    with machine_lock:
        if _machine is None:
            machine = VendingMachine(JsonItemStore(load_store_config()))
            if _seed_demo_enabled():
                seed_if_empty(machine)
            _machine = machine
        return _machine


__all__ = ["get_machine", "machine_lock"]
