"""Pydantic models for customer API responses."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from admin.infrastructure.models import CustomerModel


class CustomerResponse(BaseModel):
    """Response model for a customer row, with its branch name."""

    id: int = Field(..., description="Customer ID")
    full_name: str
    full_name_ar: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    address_ar: str | None = None
    credit_limit: Decimal
    branch_id: int | None = None
    branch_name: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_model(cls, customer: CustomerModel) -> CustomerResponse:
        """Convert a customer row to an API response."""
        return cls(
            id=customer.id,
            full_name=customer.full_name,
            full_name_ar=customer.full_name_ar,
            phone=customer.phone,
            email=customer.email,
            address=customer.address,
            address_ar=customer.address_ar,
            credit_limit=customer.credit_limit,
            branch_id=customer.branch_id,
            branch_name=customer.branch.name if customer.branch else None,
            created_at=customer.created_at,
        )
