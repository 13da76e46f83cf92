"""HTTP routes for branch management."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from admin.dependencies.branch import get_branch_reader, get_branch_repository
from admin.ports import (
    DuplicateBranchNameError,
    IBranchRepository,
    ListQuery,
    NewBranch,
)
from admin.presentation.branches.models import BranchResponse
from admin.presentation.branches.rules import (
    BRANCH_LABELS,
    BRANCH_NUMERIC_COLUMNS,
    branch_rules,
)
from admin.presentation.common import (
    MessageResponse,
    PageResponse,
    delete_ids,
    ensure_tenant_given,
    list_query,
    number,
    out_of_range,
    tenant_key,
    text,
)
from iam.dependencies.access import AccessGuard, get_access_guard
from iam.dependencies.identity import get_identity
from shared_kernel.authorization import Identity, Permission
from shared_kernel.i18n import Language, MessageCatalog
from shared_kernel.middleware import get_language
from shared_kernel.validation import validate_fields

BRANCH_MESSAGES = MessageCatalog(
    {
        Language.EN: {
            "tenant_required": "Tenant ID is missing.",
            "branch_exists": "Branch already exists.",
            "missing_ids": "Branch IDs are missing.",
            "invalid_ids": "Invalid branch IDs provided.",
            "not_found": "No matching branches found.",
            "created": "Branch created successfully.",
            "deleted": lambda count: f"{count} branch(es) deleted successfully.",
        },
        Language.AR: {
            "tenant_required": "معرّف المنظمة مفقود.",
            "branch_exists": "الفرع موجود مسبقاً.",
            "missing_ids": "معرّفات الفروع مفقودة.",
            "invalid_ids": "معرّفات الفروع غير صالحة.",
            "not_found": "لم يتم العثور على أي فرع مطابق.",
            "created": "تم إنشاء الفرع بنجاح.",
            "deleted": lambda count: f"تم حذف {count} فرع/فروع بنجاح.",
        },
    }
)

router = APIRouter(
    prefix="/branches",
    tags=["branches"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_branch(
    payload: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IBranchRepository, Depends(get_branch_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Create a branch in a tenant.

    Raises:
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 400 with a field-to-message map on invalid fields
        HTTPException: 409 if the branch name already exists in the tenant
    """
    guard.require_permission(identity, Permission.CREATE_BRANCH, language)

    result = validate_fields(payload, branch_rules(language), language)
    errors = result.errors or out_of_range(
        payload, BRANCH_NUMERIC_COLUMNS, BRANCH_LABELS, language
    )
    if errors:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)

    guard.require_tenant_access(identity, payload["tenant_id"], language)

    try:
        await repository.create(
            NewBranch(
                tenant_id=tenant_key(payload["tenant_id"], BRANCH_MESSAGES, language),
                name=str(payload["name"]).strip(),
                name_ar=text(payload, "name_ar"),
                address=text(payload, "address"),
                address_ar=text(payload, "address_ar"),
                latitude=number(payload, "latitude"),
                longitude=number(payload, "longitude"),
            )
        )
    except DuplicateBranchNameError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=BRANCH_MESSAGES.get("branch_exists", language),
        )

    return MessageResponse(message=BRANCH_MESSAGES.get("created", language))


@router.get("")
async def list_branches(
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IBranchRepository, Depends(get_branch_reader)],
    language: Annotated[Language, Depends(get_language)],
    query: Annotated[ListQuery, Depends(list_query)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> PageResponse[BranchResponse]:
    """List a tenant's branches with paging, search and sorting."""
    ensure_tenant_given(tenant_id, BRANCH_MESSAGES, language)
    guard.require(identity, Permission.VIEW_BRANCHES, tenant_id, language)

    page = await repository.list_page(
        tenant_key(tenant_id, BRANCH_MESSAGES, language), query
    )
    return PageResponse[BranchResponse].build(
        page, [BranchResponse.from_model(branch) for branch in page.items]
    )


@router.delete("")
async def delete_branches(
    body: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IBranchRepository, Depends(get_branch_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Delete several branches of a tenant.

    Body: ``{"tenant_id": ..., "branch_ids": [...]}``.
    """
    tenant_id = body.get("tenant_id")
    ensure_tenant_given(tenant_id, BRANCH_MESSAGES, language)
    ids = delete_ids(body, "branch_ids", BRANCH_MESSAGES, language)

    guard.require(identity, Permission.DELETE_BRANCH, tenant_id, language)

    deleted = await repository.delete_many(
        tenant_key(tenant_id, BRANCH_MESSAGES, language), ids
    )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=BRANCH_MESSAGES.get("not_found", language),
        )

    return MessageResponse(message=BRANCH_MESSAGES.get("deleted", language, deleted))
