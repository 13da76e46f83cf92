"""Pydantic models for role API responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from iam.infrastructure.models import RoleModel


class RoleResponse(BaseModel):
    """Response model for a role."""

    id: int = Field(..., description="Role ID")
    tenant_id: int = Field(..., description="Owning tenant ID")
    name: str = Field(..., description="Role name")
    name_ar: str | None = Field(None, description="Role name in Arabic")
    slug: str = Field(..., description="Role slug, unique within the tenant")
    description: str | None = Field(None, description="Role description")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    @classmethod
    def from_model(cls, role: RoleModel) -> RoleResponse:
        """Convert a role row to an API response."""
        return cls(
            id=role.id,
            tenant_id=role.tenant_id,
            name=role.name,
            name_ar=role.name_ar,
            slug=role.slug,
            description=role.description,
            created_at=role.created_at,
        )


class RoleListResponse(BaseModel):
    """Response model for the unpaginated role list."""

    data: list[RoleResponse] = Field(default_factory=list)
