"""PostgreSQL implementation of IRoleRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.infrastructure.models import RoleModel
from iam.infrastructure.observability import (
    DefaultRoleRepositoryProbe,
    RoleRepositoryProbe,
)
from iam.ports.repositories import IRoleRepository

# Upper bound for the unpaginated role list
MAX_ROLES = 9999


class RoleRepository(IRoleRepository):
    """Read access to tenant roles."""

    def __init__(
        self,
        session: AsyncSession,
        probe: RoleRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRoleRepositoryProbe()

    async def list_by_tenant(self, tenant_id: int) -> list[RoleModel]:
        """List every role of a tenant, ordered by id.

        Args:
            tenant_id: The tenant whose roles to list

        Returns:
            Role rows (possibly empty)
        """
        stmt = (
            select(RoleModel)
            .where(RoleModel.tenant_id == tenant_id)
            .order_by(RoleModel.id)
            .limit(MAX_ROLES)
        )
        result = await self._session.execute(stmt)
        roles = list(result.scalars().all())
        self._probe.roles_listed(str(tenant_id), len(roles))
        return roles
