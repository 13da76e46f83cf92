"""Repository protocols (ports) for the admin bounded context.

All reads and writes are scoped to one tenant: every method takes the
tenant id and implementations filter on it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from admin.infrastructure.models import BranchModel, CustomerModel, ProductModel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DEFAULT_SORT_COLUMN = "created_at"


class SortOrder(StrEnum):
    """Sort direction for list queries."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> SortOrder:
        """Anything other than ``asc`` (case-insensitive) sorts descending."""
        if value and value.strip().lower() == cls.ASC:
            return cls.ASC
        return cls.DESC


@dataclass(frozen=True)
class ListQuery:
    """Paging, search and sort parameters of a list request.

    ``sort_by`` is a column name requested by the client; repositories
    only honor names from their own whitelist.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    search: str = ""
    sort_by: str = DEFAULT_SORT_COLUMN
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a tenant-scoped list."""

    items: list[T]
    count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.count / self.page_size) if self.page_size else 0


@dataclass(frozen=True)
class NewBranch:
    """Fields of a branch to create."""

    tenant_id: int
    name: str
    name_ar: str | None = None
    address: str | None = None
    address_ar: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None


@dataclass(frozen=True)
class NewProduct:
    """Fields of a product to create."""

    tenant_id: int
    sku: str
    product_name: str
    base_price: Decimal
    barcode: str | None = None
    product_name_ar: str | None = None
    category: str | None = None
    category_ar: str | None = None


@dataclass(frozen=True)
class NewCustomer:
    """Fields of a customer to create."""

    tenant_id: int
    full_name: str
    branch_id: int | None = None
    full_name_ar: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    address_ar: str | None = None
    credit_limit: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass(frozen=True)
class CustomerChanges:
    """Fields of a customer to update.

    ``full_name`` is always rewritten; any other field left as ``None``
    keeps its stored value.
    """

    tenant_id: int
    full_name: str
    branch_id: int | None = None
    full_name_ar: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    address_ar: str | None = None
    credit_limit: Decimal | None = None


@runtime_checkable
class IBranchRepository(Protocol):
    """Tenant-scoped branch storage."""

    async def create(self, branch: NewBranch) -> BranchModel:
        """Insert a branch.

        Raises:
            DuplicateBranchNameError: If the name exists in the tenant
        """
        ...

    async def list_page(self, tenant_id: int, query: ListQuery) -> Page[BranchModel]:
        """List one page of the tenant's branches."""
        ...

    async def delete_many(self, tenant_id: int, branch_ids: list[int]) -> int:
        """Delete the listed branches of the tenant.

        Returns:
            Number of rows deleted; ids of other tenants are ignored
        """
        ...


@runtime_checkable
class IProductRepository(Protocol):
    """Tenant-scoped product storage."""

    async def create(self, product: NewProduct) -> ProductModel:
        """Insert a product.

        Raises:
            DuplicateSkuError: If the SKU exists in the tenant
        """
        ...

    async def get(self, tenant_id: int, product_id: int) -> ProductModel | None:
        """Load one product of the tenant, or None."""
        ...

    async def update(
        self, product_id: int, product: NewProduct
    ) -> ProductModel | None:
        """Rewrite every field of a product of ``product.tenant_id``.

        Returns:
            The updated row, or None when the tenant has no such product

        Raises:
            DuplicateSkuError: If another product of the tenant uses the SKU
        """
        ...

    async def list_page(self, tenant_id: int, query: ListQuery) -> Page[ProductModel]:
        """List one page of the tenant's products."""
        ...

    async def delete_many(self, tenant_id: int, product_ids: list[int]) -> int:
        """Delete the listed products of the tenant."""
        ...


@runtime_checkable
class ICustomerRepository(Protocol):
    """Tenant-scoped customer storage."""

    async def create(self, customer: NewCustomer) -> CustomerModel:
        """Insert a customer.

        Raises:
            BranchNotInTenantError: If branch_id is set and is not a branch
                of the tenant
        """
        ...

    async def get(self, tenant_id: int, customer_id: int) -> CustomerModel | None:
        """Load one customer of the tenant with its branch, or None."""
        ...

    async def update(
        self, customer_id: int, changes: CustomerChanges
    ) -> CustomerModel | None:
        """Apply ``changes`` to a customer of ``changes.tenant_id``.

        Returns:
            The updated row, or None when the tenant has no such customer

        Raises:
            BranchNotInTenantError: If branch_id is set and is not a branch
                of the tenant
        """
        ...

    async def list_page(self, tenant_id: int, query: ListQuery) -> Page[CustomerModel]:
        """List one page of the tenant's customers."""
        ...

    async def delete_many(self, tenant_id: int, customer_ids: list[int]) -> int:
        """Delete the listed customers of the tenant."""
        ...
