"""
Sales API Endpoints.

Endpoints for the transaction history screen: listing, summary figures,
single-sale detail, printable receipt and clearing the history.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.dependencies import get_machine, machine_lock
from api.models import ClearSalesResponse, SaleListResponse, SaleResponse, SalesSummaryResponse
from domain.errors import SaleNotFoundError
from services.sales_report_service import format_receipt, format_rupiah, summarize_sales
from services.vending_machine import VendingMachine

router = APIRouter()


@router.get(
    "/sales",
    response_model=SaleListResponse,
    summary="List Sales",
    description="Sale history of this process, oldest first."
)
def list_sales(machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        sales = machine.list_sales()

    return SaleListResponse(
        sales=[SaleResponse.from_sale(sale) for sale in sales],
        total_count=len(sales)
    )


@router.get(
    "/sales/summary",
    response_model=SalesSummaryResponse,
    summary="Sales Summary"
)
def get_sales_summary(machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        summary = summarize_sales(machine.list_sales())

    return SalesSummaryResponse(
        total_transactions=summary.total_transactions,
        succeeded_transactions=summary.succeeded_transactions,
        revenue=summary.revenue,
        revenue_display=format_rupiah(summary.revenue)
    )


@router.get(
    "/sales/{sale_id}",
    response_model=SaleResponse,
    summary="Get Sale"
)
def get_sale(sale_id: str, machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        sale = machine.find_sale(sale_id)

    if sale is None:
        raise SaleNotFoundError(sale_id)
    return SaleResponse.from_sale(sale)


@router.get(
    "/sales/{sale_id}/receipt",
    response_class=PlainTextResponse,
    summary="Sale Receipt"
)
def get_sale_receipt(sale_id: str, machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        sale = machine.find_sale(sale_id)

    if sale is None:
        raise SaleNotFoundError(sale_id)
    return PlainTextResponse(format_receipt(sale))


@router.delete(
    "/sales",
    response_model=ClearSalesResponse,
    summary="Clear Sale History",
    description="Remove all sale records. Inventory is not affected."
)
def clear_sales(machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        cleared = machine.sale_count()
        machine.clear_sale_history()

    return ClearSalesResponse(cleared=cleared)
