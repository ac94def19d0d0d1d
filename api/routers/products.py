"""
Products API Endpoints.

Endpoints for browsing the product grid and for administrative product
management (add, update, delete, reload from disk).
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_machine, machine_lock
from api.models import (
    ProductDeleteResponse,
    ProductListResponse,
    ProductMutationResponse,
    ProductRequest,
    ProductResponse,
    ProductUpdateRequest,
    ReloadResponse,
)
from domain.errors import ItemNotFoundError
from services.vending_machine import VendingMachine

router = APIRouter()


@router.get(
    "/products",
    response_model=ProductListResponse,
    summary="List Products",
    description="All products in display order, including sold-out ones."
)
def list_products(machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        items = machine.list_items()

    return ProductListResponse(
        items=[ProductResponse.from_item(item) for item in items],
        total_count=len(items)
    )


@router.get(
    "/products/{item_id}",
    response_model=ProductResponse,
    summary="Get Product"
)
def get_product(item_id: str, machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        item = machine.find_item(item_id)

    if item is None:
        raise ItemNotFoundError(item_id)
    return ProductResponse.from_item(item)


@router.post(
    "/products",
    response_model=ProductMutationResponse,
    status_code=201,
    summary="Add Product",
    description="Add a new product. Fails with 409 if the ID is already used."
)
def add_product(request: ProductRequest, machine: VendingMachine = Depends(get_machine)):
    """
    Add a product to the inventory.

    `persisted` is false when the product was added but the inventory file
    could not be written; the front end should warn the operator.
    """
    item = request.to_item()

    with machine_lock:
        persisted = machine.add_item(item)
        stored = machine.find_item(item.item_id)

    return ProductMutationResponse(
        product=ProductResponse.from_item(stored),
        persisted=persisted
    )


@router.put(
    "/products/{item_id}",
    response_model=ProductMutationResponse,
    summary="Update Product",
    description="Overwrite name, price, stock and image of an existing product. The ID cannot change."
)
def update_product(
    item_id: str,
    request: ProductUpdateRequest,
    machine: VendingMachine = Depends(get_machine),
):
    new_data = request.to_item(item_id)

    with machine_lock:
        persisted = machine.update_item(item_id, new_data)
        stored = machine.find_item(item_id)

    return ProductMutationResponse(
        product=ProductResponse.from_item(stored),
        persisted=persisted
    )


@router.delete(
    "/products/{item_id}",
    response_model=ProductDeleteResponse,
    summary="Delete Product"
)
def delete_product(item_id: str, machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        removed = machine.remove_item(item_id)
        persisted = machine.last_save_ok

    if not removed:
        raise ItemNotFoundError(item_id)

    return ProductDeleteResponse(item_id=item_id, removed=True, persisted=persisted)


@router.post(
    "/products/reload",
    response_model=ReloadResponse,
    summary="Reload Products",
    description="Discard in-memory inventory and re-read it from the store file."
)
def reload_products(machine: VendingMachine = Depends(get_machine)):
    with machine_lock:
        status = machine.reload()
        count = machine.item_count()

    return ReloadResponse(load_status=status.value, item_count=count)
