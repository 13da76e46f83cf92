"""PostgreSQL implementation of IBranchRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admin.infrastructure.listing import delete_owned, fetch_page
from admin.infrastructure.models import BranchModel
from admin.infrastructure.observability import (
    AdminRepositoryProbe,
    DefaultAdminRepositoryProbe,
)
from admin.ports.exceptions import DuplicateBranchNameError
from admin.ports.repositories import IBranchRepository, ListQuery, NewBranch, Page

RESOURCE = "branch"

SORT_COLUMNS = {
    "id": BranchModel.id,
    "name": BranchModel.name,
    "name_ar": BranchModel.name_ar,
    "address": BranchModel.address,
    "created_at": BranchModel.created_at,
}

SEARCH_COLUMNS = (
    BranchModel.name,
    BranchModel.name_ar,
    BranchModel.address,
    BranchModel.address_ar,
)


class BranchRepository(IBranchRepository):
    """Branch storage scoped by tenant."""

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

    async def create(self, branch: NewBranch) -> BranchModel:
        """Insert a branch, refusing a name already used in the tenant.

        Raises:
            DuplicateBranchNameError: If the name exists in the tenant
        """
        existing = await self._session.execute(
            select(BranchModel.id).where(
                BranchModel.tenant_id == branch.tenant_id,
                BranchModel.name == branch.name,
            )
        )
        if existing.first() is not None:
            self._probe.duplicate_rejected(RESOURCE, branch.tenant_id, branch.name)
            raise DuplicateBranchNameError(
                f"Branch '{branch.name}' already exists in tenant {branch.tenant_id}"
            )

        model = BranchModel(
            tenant_id=branch.tenant_id,
            name=branch.name,
            name_ar=branch.name_ar,
            address=branch.address,
            address_ar=branch.address_ar,
            latitude=branch.latitude,
            longitude=branch.longitude,
        )
        self._session.add(model)
        await self._session.flush()
        self._probe.record_created(RESOURCE, branch.tenant_id, model.id)
        return model

    async def list_page(self, tenant_id: int, query: ListQuery) -> Page[BranchModel]:
        page = await fetch_page(
            self._session, BranchModel, tenant_id, query, SEARCH_COLUMNS, SORT_COLUMNS
        )
        self._probe.records_listed(RESOURCE, tenant_id, page.count, page.page)
        return page

    async def delete_many(self, tenant_id: int, branch_ids: list[int]) -> int:
        deleted = await delete_owned(self._session, BranchModel, tenant_id, branch_ids)
        self._probe.records_deleted(RESOURCE, tenant_id, len(branch_ids), deleted)
        return deleted
