"""HTTP routes for role listing."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from iam.dependencies.access import AccessGuard, get_access_guard
from iam.dependencies.identity import get_identity
from iam.dependencies.role import get_role_repository
from iam.ports.repositories import IRoleRepository
from iam.presentation.roles.models import RoleListResponse, RoleResponse
from shared_kernel.authorization import Identity, Permission, normalize_tenant_id
from shared_kernel.i18n import Language, MessageCatalog
from shared_kernel.middleware import get_language

ROLE_MESSAGES = MessageCatalog(
    {
        Language.EN: {"tenant_required": "Tenant ID is required."},
        Language.AR: {"tenant_required": "معرف المنظمة مطلوب."},
    }
)

router = APIRouter(
    prefix="/roles",
    tags=["roles"],
)


@router.get("/list")
async def list_roles(
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IRoleRepository, Depends(get_role_repository)],
    language: Annotated[Language, Depends(get_language)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> RoleListResponse:
    """List every role of a tenant (no pagination).

    Requires ``view_roles`` and access to the tenant.

    Args:
        identity: Identity of the caller, if authenticated
        guard: Access guard
        repository: Role repository
        language: Response language
        tenant_id: Tenant whose roles to list

    Returns:
        RoleListResponse with all roles of the tenant

    Raises:
        HTTPException: 400 if tenant_id is missing or not an integer
        HTTPException: 401 if permission or tenant access is denied
    """
    if not tenant_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ROLE_MESSAGES.get("tenant_required", language),
        )

    guard.require(identity, Permission.VIEW_ROLES, tenant_id, language)

    tenant = normalize_tenant_id(tenant_id)
    if not isinstance(tenant, int):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ROLE_MESSAGES.get("tenant_required", language),
        )

    roles = await repository.list_by_tenant(tenant)
    return RoleListResponse(data=[RoleResponse.from_model(role) for role in roles])
