"""Pydantic models for product API responses."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from admin.infrastructure.models import ProductModel


class ProductResponse(BaseModel):
    """Response model for a product row."""

    id: int = Field(..., description="Product ID")
    sku: str = Field(..., description="SKU, unique within the tenant")
    barcode: str | None = None
    product_name: str
    product_name_ar: str | None = None
    category: str | None = None
    category_ar: str | None = None
    base_price: Decimal
    created_at: datetime | None = None

    @classmethod
    def from_model(cls, product: ProductModel) -> ProductResponse:
        """Convert a product row to an API response."""
        return cls(
            id=product.id,
            sku=product.sku,
            barcode=product.barcode,
            product_name=product.product_name,
            product_name_ar=product.product_name_ar,
            category=product.category,
            category_ar=product.category_ar,
            base_price=product.base_price,
            created_at=product.created_at,
        )
