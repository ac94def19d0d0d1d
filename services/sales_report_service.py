"""
Sales reporting service.

Builds the read-only views a front end shows over the engine's data:
- Sales summary (transaction count, succeeded count, revenue)
- Printable receipt for a single sale
- Low-stock listing for operators
- Rupiah currency formatting
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from domain.item import Item
from domain.sale import Sale, SaleStatus
from domain.time import display_timestamp


@dataclass(frozen=True, slots=True)
class SalesSummary:
    """
    Aggregate figures over a sale history.

    Revenue counts SUCCEEDED sales only.
    """
    total_transactions: int
    succeeded_transactions: int
    revenue: Decimal


def summarize_sales(sales: Iterable[Sale]) -> SalesSummary:
    total = 0
    succeeded = 0
    revenue = Decimal("0")

    for sale in sales:
        total += 1
        if sale.status is SaleStatus.SUCCEEDED:
            succeeded += 1
            revenue += sale.total

    return SalesSummary(
        total_transactions=total,
        succeeded_transactions=succeeded,
        revenue=revenue,
    )


def format_rupiah(amount: Decimal) -> str:
    """
    Format an amount as Indonesian Rupiah, rounded to whole units.

    Example:
        format_rupiah(Decimal("1250000"))
        # Returns "Rp 1.250.000"
    """
    whole = int(Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    return f"{sign}Rp {abs(whole):,}".replace(",", ".")


def format_receipt(sale: Sale) -> str:
    """
    Render a sale as a fixed-layout, multi-line receipt.

    Example:
        === TRANSACTION DETAIL ===
        Transaction ID : TRX-20250101120000000-0001
        Item           : Kopi Hitam
        Unit Price     : Rp 10.000
        Quantity       : 1
        Total          : Rp 10.000
        Status         : Succeeded
        Time           : 01-01-2025 12:00:00
        ==========================
    """
    lines = [
        "=== TRANSACTION DETAIL ===",
        f"Transaction ID : {sale.sale_id}",
        f"Item           : {sale.item.name}",
        f"Unit Price     : {format_rupiah(sale.item.price)}",
        f"Quantity       : {sale.quantity}",
        f"Total          : {format_rupiah(sale.total)}",
        f"Status         : {sale.status.display_name}",
        f"Time           : {display_timestamp(sale.created_at)}",
        "==========================",
    ]
    return "\n".join(lines)


def low_stock_items(items: Iterable[Item], threshold: int = 5) -> List[Item]:
    """Items whose stock is at or below `threshold`, lowest stock first."""

    if threshold < 0:
        raise ValueError("threshold must be >= 0")
    return sorted((item for item in items if item.stock <= threshold), key=lambda item: item.stock)


__all__ = [
    "SalesSummary",
    "format_receipt",
    "format_rupiah",
    "low_stock_items",
    "summarize_sales",
]
