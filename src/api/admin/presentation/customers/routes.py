"""HTTP routes for customer management."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status

from admin.dependencies.customer import get_customer_reader, get_customer_repository
from admin.ports import (
    BranchNotInTenantError,
    CustomerChanges,
    ICustomerRepository,
    ListQuery,
    NewCustomer,
)
from admin.presentation.common import (
    MAX_KEY,
    MessageResponse,
    PageResponse,
    coerce_ids,
    delete_ids,
    ensure_tenant_given,
    list_query,
    number,
    out_of_range,
    tenant_key,
    text,
)
from admin.presentation.customers.models import CustomerResponse
from admin.presentation.customers.rules import (
    CUSTOMER_LABELS,
    CUSTOMER_NUMERIC_COLUMNS,
    customer_rules,
    customer_update_rules,
)
from iam.dependencies.access import AccessGuard, get_access_guard
from iam.dependencies.identity import get_identity
from shared_kernel.authorization import Identity, Permission
from shared_kernel.i18n import Language, MessageCatalog
from shared_kernel.middleware import get_language
from shared_kernel.validation import validate_fields

CUSTOMER_MESSAGES = MessageCatalog(
    {
        Language.EN: {
            "tenant_required": "Tenant ID is required.",
            "branch_not_found": "Branch not found for this tenant.",
            "missing_ids": "Customer IDs are required.",
            "invalid_ids": "Invalid customer IDs.",
            "not_found": "No matching customers were found.",
            "not_found_one": "Customer not found.",
            "created": "Customer created successfully.",
            "updated": "Customer updated successfully.",
            "deleted_one": "Customer deleted successfully.",
            "deleted": lambda count: f"Deleted {count} customer(s).",
        },
        Language.AR: {
            "tenant_required": "رقم المستأجر (المنظمة) مطلوب.",
            "branch_not_found": "الفرع غير موجود لهذه الشركة.",
            "missing_ids": "يجب تزويد أرقام العملاء.",
            "invalid_ids": "أرقام العملاء غير صالحة.",
            "not_found": "لم يتم العثور على عملاء مطابقين.",
            "not_found_one": "العميل غير موجود.",
            "created": "تم إنشاء العميل بنجاح.",
            "updated": "تم تحديث بيانات العميل بنجاح.",
            "deleted_one": "تم حذف بيانات العميل بنجاح.",
            "deleted": lambda count: f"تم حذف {count} عميل.",
        },
    }
)

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
)

CustomerId = Annotated[int, Path(ge=1, le=MAX_KEY)]


def _branch_id(payload: dict[str, Any], language: Language) -> int | None:
    value = payload.get("branch_id")
    if value is None or value == "":
        return None
    ids = coerce_ids([value])
    if not ids:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_MESSAGES.get("branch_not_found", language),
        )
    return ids[0]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_customer(
    payload: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[ICustomerRepository, Depends(get_customer_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Create a customer in a tenant, optionally attached to one of its branches.

    Optional fields are stored as NULL when absent; credit_limit defaults to 0.

    Raises:
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 400 with a field-to-message map on invalid fields
        HTTPException: 404 if branch_id is not a branch of the tenant
    """
    guard.require_permission(identity, Permission.CREATE_CUSTOMER, language)

    result = validate_fields(payload, customer_rules(language), language)
    errors = result.errors or out_of_range(
        payload, CUSTOMER_NUMERIC_COLUMNS, CUSTOMER_LABELS, language
    )
    if errors:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)

    guard.require_tenant_access(identity, payload["tenant_id"], language)

    try:
        await repository.create(
            NewCustomer(
                tenant_id=tenant_key(payload["tenant_id"], CUSTOMER_MESSAGES, language),
                full_name=str(payload["full_name"]).strip(),
                branch_id=_branch_id(payload, language),
                full_name_ar=text(payload, "full_name_ar"),
                email=text(payload, "email"),
                phone=text(payload, "phone"),
                address=text(payload, "address"),
                address_ar=text(payload, "address_ar"),
                credit_limit=number(payload, "credit_limit") or Decimal("0"),
            )
        )
    except BranchNotInTenantError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_MESSAGES.get("branch_not_found", language),
        )

    return MessageResponse(message=CUSTOMER_MESSAGES.get("created", language))


@router.get("")
async def list_customers(
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[ICustomerRepository, Depends(get_customer_reader)],
    language: Annotated[Language, Depends(get_language)],
    query: Annotated[ListQuery, Depends(list_query)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> PageResponse[CustomerResponse]:
    """List a tenant's customers with paging, search and sorting.

    Search matches names, phone and email.
    """
    ensure_tenant_given(tenant_id, CUSTOMER_MESSAGES, language)
    guard.require(identity, Permission.VIEW_CUSTOMERS, tenant_id, language)

    page = await repository.list_page(
        tenant_key(tenant_id, CUSTOMER_MESSAGES, language), query
    )
    return PageResponse[CustomerResponse].build(
        page, [CustomerResponse.from_model(customer) for customer in page.items]
    )


@router.delete("")
async def delete_customers(
    body: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[ICustomerRepository, Depends(get_customer_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Delete several customers of a tenant.

    Body: ``{"tenant_id": ..., "customer_ids": [...]}``.
    """
    tenant_id = body.get("tenant_id")
    ensure_tenant_given(tenant_id, CUSTOMER_MESSAGES, language)
    ids = delete_ids(body, "customer_ids", CUSTOMER_MESSAGES, language)

    guard.require(identity, Permission.DELETE_CUSTOMER, tenant_id, language)

    deleted = await repository.delete_many(
        tenant_key(tenant_id, CUSTOMER_MESSAGES, language), ids
    )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_MESSAGES.get("not_found", language),
        )

    return MessageResponse(message=CUSTOMER_MESSAGES.get("deleted", language, deleted))


@router.get("/{customer_id}")
async def get_customer(
    customer_id: CustomerId,
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[ICustomerRepository, Depends(get_customer_reader)],
    language: Annotated[Language, Depends(get_language)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> CustomerResponse:
    """Return one customer of a tenant, with its branch name."""
    ensure_tenant_given(tenant_id, CUSTOMER_MESSAGES, language)
    guard.require(identity, Permission.VIEW_CUSTOMERS, tenant_id, language)

    customer = await repository.get(
        tenant_key(tenant_id, CUSTOMER_MESSAGES, language), customer_id
    )
    if customer is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_MESSAGES.get("not_found_one", language),
        )
    return CustomerResponse.from_model(customer)


@router.put("/{customer_id}")
async def update_customer(
    customer_id: CustomerId,
    payload: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[ICustomerRepository, Depends(get_customer_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Update a customer of a tenant.

    ``full_name`` is required; other fields are written only when given
    and non-empty, so an omitted field keeps its stored value.

    Raises:
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 400 with a field-to-message map on invalid fields
        HTTPException: 404 if branch_id is not a branch of the tenant, or
            the customer is not in the tenant
    """
    guard.require_permission(identity, Permission.EDIT_CUSTOMER, language)

    result = validate_fields(payload, customer_update_rules(language), language)
    errors = result.errors or out_of_range(
        payload, CUSTOMER_NUMERIC_COLUMNS, CUSTOMER_LABELS, language
    )
    if errors:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)

    guard.require_tenant_access(identity, payload["tenant_id"], language)

    try:
        updated = await repository.update(
            customer_id,
            CustomerChanges(
                tenant_id=tenant_key(payload["tenant_id"], CUSTOMER_MESSAGES, language),
                full_name=str(payload["full_name"]).strip(),
                branch_id=_branch_id(payload, language),
                full_name_ar=text(payload, "full_name_ar"),
                email=text(payload, "email"),
                phone=text(payload, "phone"),
                address=text(payload, "address"),
                address_ar=text(payload, "address_ar"),
                credit_limit=number(payload, "credit_limit"),
            ),
        )
    except BranchNotInTenantError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_MESSAGES.get("branch_not_found", language),
        )
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_MESSAGES.get("not_found_one", language),
        )

    return MessageResponse(message=CUSTOMER_MESSAGES.get("updated", language))


@router.delete("/{customer_id}")
async def delete_customer(
    customer_id: CustomerId,
    body: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[ICustomerRepository, Depends(get_customer_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Delete one customer of a tenant. Body: ``{"tenant_id": ...}``."""
    tenant_id = body.get("tenant_id")
    ensure_tenant_given(tenant_id, CUSTOMER_MESSAGES, language)
    guard.require(identity, Permission.DELETE_CUSTOMER, tenant_id, language)

    deleted = await repository.delete_many(
        tenant_key(tenant_id, CUSTOMER_MESSAGES, language), [customer_id]
    )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_MESSAGES.get("not_found_one", language),
        )

    return MessageResponse(message=CUSTOMER_MESSAGES.get("deleted_one", language))
