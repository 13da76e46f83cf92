"""Pydantic models for branch API responses."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from admin.infrastructure.models import BranchModel


class BranchResponse(BaseModel):
    """Response model for a branch row."""

    id: int = Field(..., description="Branch ID")
    tenant_id: int = Field(..., description="Owning tenant ID")
    name: str
    name_ar: str | None = None
    address: str | None = None
    address_ar: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    created_at: datetime | None = None

    @classmethod
    def from_model(cls, branch: BranchModel) -> BranchResponse:
        """Convert a branch row to an API response."""
        return cls(
            id=branch.id,
            tenant_id=branch.tenant_id,
            name=branch.name,
            name_ar=branch.name_ar,
            address=branch.address,
            address_ar=branch.address_ar,
            latitude=branch.latitude,
            longitude=branch.longitude,
            created_at=branch.created_at,
        )
