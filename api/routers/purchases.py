"""
Purchases API Endpoints.

Endpoint for buying a single unit of a product. Payment is simulated by the
front end before this call; the core only records the sale.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_machine, machine_lock
from api.models import PurchaseRequest, PurchaseResponse, SaleResponse
from services.vending_machine import VendingMachine

router = APIRouter()


@router.post(
    "/purchases",
    response_model=PurchaseResponse,
    status_code=201,
    summary="Execute Purchase",
    description="Buy one unit of a product, decrementing its stock and recording a sale."
)
def execute_purchase(request: PurchaseRequest, machine: VendingMachine = Depends(get_machine)):
    """
    Execute a purchase of one unit.

    **Process:**
    1. Re-resolves the product by ID (the client's copy may be stale)
    2. Rejects with 409 if the product is out of stock
    3. Decrements stock by one and records a SUCCEEDED sale
    4. Saves the inventory

    **Failure responses:**
    - 404 `NOT_FOUND`: no product has this ID
    - 409 `OUT_OF_STOCK`: the product has no stock left
    """
    with machine_lock:
        sale = machine.purchase(request.item_id)
        persisted = machine.last_save_ok
        item = machine.find_item(request.item_id)

    if persisted:
        message = "Purchase completed successfully."
    else:
        message = "Purchase completed, but the inventory could not be saved."

    return PurchaseResponse(
        sale=SaleResponse.from_sale(sale),
        remaining_stock=item.stock if item is not None else 0,
        persisted=persisted,
        message=message
    )
