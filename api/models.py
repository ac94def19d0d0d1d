"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
Range rules (price >= 0, stock >= 0) are enforced by the domain so that the
error messages match whatever front end calls the engine.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.item import Item
from domain.sale import Sale


# ============================================================================
# Product Models
# ============================================================================

class ProductRequest(BaseModel):
    """Request to add a new product."""
    item_id: str = Field(..., description="Unique product ID")
    name: str
    price: Decimal
    stock: int
    image_ref: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "item_id": "P001",
                "name": "Kopi Hitam",
                "price": "10000",
                "stock": 15,
                "image_ref": "/images/kopi.png"
            }
        }

    def to_item(self) -> Item:
        return Item(
            item_id=self.item_id,
            name=self.name,
            price=self.price,
            stock=self.stock,
            image_ref=self.image_ref,
        )


class ProductUpdateRequest(BaseModel):
    """Request to overwrite an existing product. item_id, if sent, must match the path."""
    item_id: Optional[str] = None
    name: str
    price: Decimal
    stock: int
    image_ref: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Kopi Susu",
                "price": "12000",
                "stock": 15,
                "image_ref": "/images/kopi.png"
            }
        }

    def to_item(self, item_id: str) -> Item:
        return Item(
            item_id=self.item_id if self.item_id is not None else item_id,
            name=self.name,
            price=self.price,
            stock=self.stock,
            image_ref=self.image_ref,
        )


class ProductResponse(BaseModel):
    """Single product in API response."""
    item_id: str
    name: str
    price: Decimal
    stock: int
    image_ref: str
    in_stock: bool

    @classmethod
    def from_item(cls, item: Item) -> "ProductResponse":
        return cls(
            item_id=item.item_id,
            name=item.name,
            price=item.price,
            stock=item.stock,
            image_ref=item.image_ref,
            in_stock=item.in_stock,
        )


class ProductListResponse(BaseModel):
    """Response for product listing."""
    items: List[ProductResponse]
    total_count: int


class ProductMutationResponse(BaseModel):
    """Response after adding or updating a product."""
    product: ProductResponse
    persisted: bool


class ProductDeleteResponse(BaseModel):
    """Response after removing a product."""
    item_id: str
    removed: bool
    persisted: bool


class ReloadResponse(BaseModel):
    """Response after reloading inventory from the store."""
    load_status: str
    item_count: int


# ============================================================================
# Purchase / Sale Models
# ============================================================================

class PurchaseRequest(BaseModel):
    """Request to buy one unit of a product."""
    item_id: str = Field(..., description="ID of the product to buy")

    class Config:
        json_schema_extra = {
            "example": {
                "item_id": "P001"
            }
        }


class SaleResponse(BaseModel):
    """Single sale in API response."""
    sale_id: str
    item_id: str
    item_name: str
    unit_price: Decimal
    quantity: int
    total: Decimal
    status: str
    created_at: datetime

    @classmethod
    def from_sale(cls, sale: Sale) -> "SaleResponse":
        return cls(
            sale_id=sale.sale_id,
            item_id=sale.item.item_id,
            item_name=sale.item.name,
            unit_price=sale.item.price,
            quantity=sale.quantity,
            total=sale.total,
            status=sale.status.value,
            created_at=sale.created_at,
        )


class PurchaseResponse(BaseModel):
    """Response after a purchase."""
    sale: SaleResponse
    remaining_stock: int
    persisted: bool
    message: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "sale": {
                    "sale_id": "TRX-20250101120000000-0001",
                    "item_id": "P001",
                    "item_name": "Kopi Hitam",
                    "unit_price": "10000",
                    "quantity": 1,
                    "total": "10000",
                    "status": "SUCCEEDED",
                    "created_at": "2025-01-01T12:00:00Z"
                },
                "remaining_stock": 14,
                "persisted": True,
                "message": "Purchase completed successfully."
            }
        }


class SaleListResponse(BaseModel):
    """Response for sale history listing."""
    sales: List[SaleResponse]
    total_count: int


class SalesSummaryResponse(BaseModel):
    """Aggregate figures over the sale history."""
    total_transactions: int
    succeeded_transactions: int
    revenue: Decimal
    revenue_display: str


class ClearSalesResponse(BaseModel):
    """Response after clearing the sale history."""
    cleared: int


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    status_code: int

    class Config:
        json_schema_extra = {
            "example": {
                "error": "OUT_OF_STOCK",
                "detail": "'Kopi Hitam' is out of stock",
                "status_code": 409
            }
        }
