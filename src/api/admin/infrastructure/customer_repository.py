"""PostgreSQL implementation of ICustomerRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admin.infrastructure.listing import delete_owned, fetch_page
from admin.infrastructure.models import BranchModel, CustomerModel
from admin.infrastructure.observability import (
    AdminRepositoryProbe,
    DefaultAdminRepositoryProbe,
)
from admin.ports.exceptions import BranchNotInTenantError
from admin.ports.repositories import (
    CustomerChanges,
    ICustomerRepository,
    ListQuery,
    NewCustomer,
    Page,
)

RESOURCE = "customer"

SORT_COLUMNS = {
    "id": CustomerModel.id,
    "full_name": CustomerModel.full_name,
    "full_name_ar": CustomerModel.full_name_ar,
    "email": CustomerModel.email,
    "credit_limit": CustomerModel.credit_limit,
    "created_at": CustomerModel.created_at,
}

SEARCH_COLUMNS = (
    CustomerModel.full_name,
    CustomerModel.full_name_ar,
    CustomerModel.phone,
    CustomerModel.email,
)

_OPTIONAL_FIELDS = (
    "branch_id",
    "full_name_ar",
    "email",
    "phone",
    "address",
    "address_ar",
    "credit_limit",
)


class CustomerRepository(ICustomerRepository):
    """Customer storage scoped by tenant."""

    def __init__(
        self,
        session: AsyncSession,
        probe: AdminRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultAdminRepositoryProbe()

    async def create(self, customer: NewCustomer) -> CustomerModel:
        """Insert a customer.

        Raises:
            BranchNotInTenantError: If branch_id is set and is not a branch
                of the tenant
        """
        if customer.branch_id is not None:
            await self._ensure_branch(customer.tenant_id, customer.branch_id)

        model = CustomerModel(
            tenant_id=customer.tenant_id,
            branch_id=customer.branch_id,
            full_name=customer.full_name,
            full_name_ar=customer.full_name_ar,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            address_ar=customer.address_ar,
            credit_limit=customer.credit_limit,
        )
        self._session.add(model)
        await self._session.flush()
        self._probe.record_created(RESOURCE, customer.tenant_id, model.id)
        return model

    async def get(self, tenant_id: int, customer_id: int) -> CustomerModel | None:
        result = await self._session.execute(
            select(CustomerModel).where(
                CustomerModel.tenant_id == tenant_id,
                CustomerModel.id == customer_id,
            )
        )
        return result.scalar_one_or_none()

    async def update(
        self, customer_id: int, changes: CustomerChanges
    ) -> CustomerModel | None:
        """Apply ``changes`` to a customer of the tenant.

        The branch is checked before the customer is looked up.

        Raises:
            BranchNotInTenantError: If branch_id is set and is not a branch
                of the tenant
        """
        if changes.branch_id is not None:
            await self._ensure_branch(changes.tenant_id, changes.branch_id)

        model = await self.get(changes.tenant_id, customer_id)
        if model is None:
            return None

        model.full_name = changes.full_name
        for field in _OPTIONAL_FIELDS:
            value = getattr(changes, field)
            if value is not None:
                setattr(model, field, value)
        await self._session.flush()
        self._probe.record_updated(RESOURCE, changes.tenant_id, model.id)
        return model

    async def list_page(self, tenant_id: int, query: ListQuery) -> Page[CustomerModel]:
        page = await fetch_page(
            self._session, CustomerModel, tenant_id, query, SEARCH_COLUMNS, SORT_COLUMNS
        )
        self._probe.records_listed(RESOURCE, tenant_id, page.count, page.page)
        return page

    async def delete_many(self, tenant_id: int, customer_ids: list[int]) -> int:
        deleted = await delete_owned(
            self._session, CustomerModel, tenant_id, customer_ids
        )
        self._probe.records_deleted(RESOURCE, tenant_id, len(customer_ids), deleted)
        return deleted

    async def _ensure_branch(self, tenant_id: int, branch_id: int) -> None:
        branch = await self._session.execute(
            select(BranchModel.id).where(
                BranchModel.tenant_id == tenant_id,
                BranchModel.id == branch_id,
            )
        )
        if branch.first() is None:
            raise BranchNotInTenantError(
                f"Branch {branch_id} not found in tenant {tenant_id}"
            )
