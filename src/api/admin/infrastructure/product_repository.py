"""PostgreSQL implementation of IProductRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from admin.infrastructure.listing import delete_owned, fetch_page
from admin.infrastructure.models import ProductModel
from admin.infrastructure.observability import (
    AdminRepositoryProbe,
    DefaultAdminRepositoryProbe,
)
from admin.ports.exceptions import DuplicateSkuError
from admin.ports.repositories import IProductRepository, ListQuery, NewProduct, Page

RESOURCE = "product"

SORT_COLUMNS = {
    "id": ProductModel.id,
    "sku": ProductModel.sku,
    "barcode": ProductModel.barcode,
    "product_name": ProductModel.product_name,
    "product_name_ar": ProductModel.product_name_ar,
    "category": ProductModel.category,
    "base_price": ProductModel.base_price,
    "created_at": ProductModel.created_at,
}

SEARCH_COLUMNS = (
    ProductModel.product_name,
    ProductModel.product_name_ar,
    ProductModel.category,
    ProductModel.category_ar,
    ProductModel.sku,
    ProductModel.barcode,
)


class ProductRepository(IProductRepository):
    """Product storage scoped by tenant."""

    def __init__(
        self,
        session: AsyncSession,
        probe: AdminRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultAdminRepositoryProbe()

    async def create(self, product: NewProduct) -> ProductModel:
        """Insert a product, refusing a SKU already used in the tenant.

        The existence check gives the common case a clean error; the
        unique constraint catches concurrent inserts of the same SKU.

        Raises:
            DuplicateSkuError: If the SKU exists in the tenant
        """
        await self._ensure_sku_free(product)

        model = ProductModel(tenant_id=product.tenant_id)
        self._assign(model, product)
        self._session.add(model)
        await self._flush(product)

        self._probe.record_created(RESOURCE, product.tenant_id, model.id)
        return model

    async def get(self, tenant_id: int, product_id: int) -> ProductModel | None:
        result = await self._session.execute(
            select(ProductModel).where(
                ProductModel.tenant_id == tenant_id,
                ProductModel.id == product_id,
            )
        )
        return result.scalar_one_or_none()

    async def update(
        self, product_id: int, product: NewProduct
    ) -> ProductModel | None:
        """Rewrite a product of the tenant; the SKU stays unique per tenant.

        Raises:
            DuplicateSkuError: If another product of the tenant uses the SKU
        """
        model = await self.get(product.tenant_id, product_id)
        if model is None:
            return None

        await self._ensure_sku_free(product, exclude_id=product_id)
        self._assign(model, product)
        await self._flush(product)

        self._probe.record_updated(RESOURCE, product.tenant_id, model.id)
        return model

    async def list_page(self, tenant_id: int, query: ListQuery) -> Page[ProductModel]:
        page = await fetch_page(
            self._session, ProductModel, tenant_id, query, SEARCH_COLUMNS, SORT_COLUMNS
        )
        self._probe.records_listed(RESOURCE, tenant_id, page.count, page.page)
        return page

    async def delete_many(self, tenant_id: int, product_ids: list[int]) -> int:
        deleted = await delete_owned(
            self._session, ProductModel, tenant_id, product_ids
        )
        self._probe.records_deleted(RESOURCE, tenant_id, len(product_ids), deleted)
        return deleted

    async def _ensure_sku_free(
        self, product: NewProduct, exclude_id: int | None = None
    ) -> None:
        stmt = select(ProductModel.id).where(
            ProductModel.tenant_id == product.tenant_id,
            ProductModel.sku == product.sku,
        )
        if exclude_id is not None:
            stmt = stmt.where(ProductModel.id != exclude_id)
        existing = await self._session.execute(stmt)
        if existing.first() is not None:
            self._probe.duplicate_rejected(RESOURCE, product.tenant_id, product.sku)
            raise DuplicateSkuError(
                f"SKU '{product.sku}' already exists in tenant {product.tenant_id}"
            )

    async def _flush(self, product: NewProduct) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            if "uq_products_tenant_sku" in str(e.orig):
                self._probe.duplicate_rejected(RESOURCE, product.tenant_id, product.sku)
                raise DuplicateSkuError(
                    f"SKU '{product.sku}' already exists in tenant {product.tenant_id}"
                ) from e
            raise

    @staticmethod
    def _assign(model: ProductModel, product: NewProduct) -> None:
        model.sku = product.sku
        model.barcode = product.barcode
        model.product_name = product.product_name
        model.product_name_ar = product.product_name_ar
        model.category = product.category
        model.category_ar = product.category_ar
        model.base_price = product.base_price
