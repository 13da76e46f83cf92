"""HTTP routes for product management."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status

from admin.dependencies.product import get_product_reader, get_product_repository
from admin.ports import DuplicateSkuError, IProductRepository, ListQuery, NewProduct
from admin.presentation.common import (
    MAX_KEY,
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
from admin.presentation.products.models import ProductResponse
from admin.presentation.products.rules import (
    PRODUCT_LABELS,
    PRODUCT_NUMERIC_COLUMNS,
    product_rules,
)
from iam.dependencies.access import AccessGuard, get_access_guard
from iam.dependencies.identity import get_identity
from shared_kernel.authorization import Identity, Permission
from shared_kernel.i18n import Language, MessageCatalog
from shared_kernel.middleware import get_language
from shared_kernel.validation import validate_fields

PRODUCT_MESSAGES = MessageCatalog(
    {
        Language.EN: {
            "tenant_required": "Tenant ID is required.",
            "sku_exists": "SKU already exists.",
            "missing_ids": "Product IDs are required.",
            "invalid_ids": "Invalid product_ids payload.",
            "not_found": "No products found.",
            "not_found_one": "No product found.",
            "created": "Product created successfully.",
            "updated": "Product updated successfully.",
            "deleted_one": "Product deleted successfully.",
            "deleted": lambda count: f"Deleted {count} product(s).",
        },
        Language.AR: {
            "tenant_required": "معرف المنظمة مطلوب.",
            "sku_exists": "الرمز SKU موجود مسبقاً.",
            "missing_ids": "معرفات المنتجات مطلوبة.",
            "invalid_ids": "قائمة المنتجات غير صالحة.",
            "not_found": "لم يتم العثور على أي منتجات.",
            "not_found_one": "لم يتم العثور على المنتج.",
            "created": "تم إنشاء المنتج بنجاح.",
            "updated": "تم تحديث المنتج بنجاح.",
            "deleted_one": "تم حذف المنتج بنجاح.",
            "deleted": lambda count: f"تم حذف {count} منتج.",
        },
    }
)

router = APIRouter(
    prefix="/products",
    tags=["products"],
)

ProductId = Annotated[int, Path(ge=1, le=MAX_KEY)]


def _validated_product(
    payload: dict[str, Any],
    identity: Identity | None,
    guard: AccessGuard,
    language: Language,
) -> NewProduct:
    """Validate a product body, then check access to its tenant."""
    result = validate_fields(payload, product_rules(language), language)
    errors = result.errors or out_of_range(
        payload, PRODUCT_NUMERIC_COLUMNS, PRODUCT_LABELS, language
    )
    if errors:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)

    guard.require_tenant_access(identity, payload["tenant_id"], language)

    return NewProduct(
        tenant_id=tenant_key(payload["tenant_id"], PRODUCT_MESSAGES, language),
        sku=str(payload["sku"]).strip(),
        product_name=str(payload["product_name"]).strip(),
        base_price=number(payload, "base_price"),
        barcode=text(payload, "barcode"),
        product_name_ar=text(payload, "product_name_ar"),
        category=text(payload, "category"),
        category_ar=text(payload, "category_ar"),
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IProductRepository, Depends(get_product_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Create a product in a tenant.

    Checks run in a fixed order: ``create_product`` permission, field
    validation, tenant access, then SKU uniqueness.

    Raises:
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 400 with a field-to-message map on invalid fields
        HTTPException: 409 if the SKU already exists in the tenant
    """
    guard.require_permission(identity, Permission.CREATE_PRODUCT, language)
    product = _validated_product(payload, identity, guard, language)

    try:
        await repository.create(product)
    except DuplicateSkuError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=PRODUCT_MESSAGES.get("sku_exists", language),
        )

    return MessageResponse(message=PRODUCT_MESSAGES.get("created", language))


@router.get("")
async def list_products(
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IProductRepository, Depends(get_product_reader)],
    language: Annotated[Language, Depends(get_language)],
    query: Annotated[ListQuery, Depends(list_query)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> PageResponse[ProductResponse]:
    """List a tenant's products with paging, search and sorting.

    Search matches names, categories, SKU and barcode. ``sortBy`` accepts
    a product column name and falls back to ``created_at``.
    """
    ensure_tenant_given(tenant_id, PRODUCT_MESSAGES, language)
    guard.require(identity, Permission.VIEW_PRODUCTS, tenant_id, language)

    page = await repository.list_page(
        tenant_key(tenant_id, PRODUCT_MESSAGES, language), query
    )
    return PageResponse[ProductResponse].build(
        page, [ProductResponse.from_model(product) for product in page.items]
    )


@router.delete("")
async def delete_products(
    body: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IProductRepository, Depends(get_product_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Delete several products of a tenant.

    Body: ``{"tenant_id": ..., "product_ids": [...]}``. Ids belonging to
    other tenants are ignored.

    Raises:
        HTTPException: 400 if tenant_id or product_ids is missing or invalid
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 404 if none of the ids matched a product of the tenant
    """
    tenant_id = body.get("tenant_id")
    ensure_tenant_given(tenant_id, PRODUCT_MESSAGES, language)
    ids = delete_ids(body, "product_ids", PRODUCT_MESSAGES, language)

    guard.require(identity, Permission.DELETE_PRODUCT, tenant_id, language)

    deleted = await repository.delete_many(
        tenant_key(tenant_id, PRODUCT_MESSAGES, language), ids
    )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=PRODUCT_MESSAGES.get("not_found", language),
        )

    return MessageResponse(message=PRODUCT_MESSAGES.get("deleted", language, deleted))


@router.get("/{product_id}")
async def get_product(
    product_id: ProductId,
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IProductRepository, Depends(get_product_reader)],
    language: Annotated[Language, Depends(get_language)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> ProductResponse:
    """Return one product of a tenant.

    Raises:
        HTTPException: 400 if tenant_id is missing
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 404 if the product is not in the tenant
    """
    ensure_tenant_given(tenant_id, PRODUCT_MESSAGES, language)
    guard.require(identity, Permission.VIEW_PRODUCTS, tenant_id, language)

    product = await repository.get(
        tenant_key(tenant_id, PRODUCT_MESSAGES, language), product_id
    )
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=PRODUCT_MESSAGES.get("not_found_one", language),
        )
    return ProductResponse.from_model(product)


@router.put("/{product_id}")
async def update_product(
    product_id: ProductId,
    payload: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IProductRepository, Depends(get_product_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Rewrite a product. The body carries every field, as on create.

    Raises:
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 400 with a field-to-message map on invalid fields
        HTTPException: 404 if the product is not in the tenant
        HTTPException: 409 if another product of the tenant has the SKU
    """
    guard.require_permission(identity, Permission.EDIT_PRODUCT, language)
    product = _validated_product(payload, identity, guard, language)

    try:
        updated = await repository.update(product_id, product)
    except DuplicateSkuError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=PRODUCT_MESSAGES.get("sku_exists", language),
        )
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=PRODUCT_MESSAGES.get("not_found_one", language),
        )

    return MessageResponse(message=PRODUCT_MESSAGES.get("updated", language))


@router.delete("/{product_id}")
async def delete_product(
    product_id: ProductId,
    body: Annotated[dict[str, Any], Body()],
    identity: Annotated[Identity | None, Depends(get_identity)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    repository: Annotated[IProductRepository, Depends(get_product_repository)],
    language: Annotated[Language, Depends(get_language)],
) -> MessageResponse:
    """Delete one product of a tenant. Body: ``{"tenant_id": ...}``.

    Raises:
        HTTPException: 400 if tenant_id is missing
        HTTPException: 401 if permission or tenant access is denied
        HTTPException: 404 if the product is not in the tenant
    """
    tenant_id = body.get("tenant_id")
    ensure_tenant_given(tenant_id, PRODUCT_MESSAGES, language)
    guard.require(identity, Permission.DELETE_PRODUCT, tenant_id, language)

    deleted = await repository.delete_many(
        tenant_key(tenant_id, PRODUCT_MESSAGES, language), [product_id]
    )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=PRODUCT_MESSAGES.get("not_found_one", language),
        )

    return MessageResponse(message=PRODUCT_MESSAGES.get("deleted_one", language))
