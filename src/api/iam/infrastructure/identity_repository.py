"""PostgreSQL implementation of IIdentityRepository.

Builds the request Identity from the users table, the user's role slug
and the distinct permission codes granted to that role. Roles and
permissions are read on every request so that changes take effect
without re-issuing tokens.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.infrastructure.models import (
    ACTIVE_STATUS,
    PermissionModel,
    RoleModel,
    UserModel,
    role_permissions,
)
from iam.infrastructure.observability import (
    DefaultIdentityRepositoryProbe,
    IdentityRepositoryProbe,
)
from iam.ports.repositories import IIdentityRepository
from shared_kernel.authorization import Identity


class IdentityRepository(IIdentityRepository):
    """Loads Identity values from PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: IdentityRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultIdentityRepositoryProbe()

    async def load(self, user_id: int) -> Identity | None:
        """Load the identity of an active user.

        Args:
            user_id: The user's primary key

        Returns:
            The Identity, or None if the user is missing or not active
        """
        stmt = (
            select(UserModel, RoleModel.slug)
            .outerjoin(RoleModel, UserModel.role_id == RoleModel.id)
            .where(UserModel.id == user_id)
        )
        result = await self._session.execute(stmt)
        row = result.first()

        if row is None:
            self._probe.user_not_found(str(user_id))
            return None

        user, role_slug = row
        if user.status != ACTIVE_STATUS:
            self._probe.user_inactive(str(user_id), user.status)
            return None

        permissions: list[str] = []
        if user.role_id is not None:
            perm_stmt = (
                select(PermissionModel.code)
                .join(
                    role_permissions,
                    role_permissions.c.permission_id == PermissionModel.id,
                )
                .where(role_permissions.c.role_id == user.role_id)
                .distinct()
            )
            perm_result = await self._session.execute(perm_stmt)
            permissions = list(perm_result.scalars().all())

        identity = Identity.create(
            user_id=user.id,
            tenant_id=user.tenant_id,
            roles=[role_slug] if role_slug else [],
            permissions=permissions,
            email=user.email,
            name=user.full_name or user.email,
        )
        self._probe.identity_loaded(
            user_id=identity.user_id,
            tenant_id=str(user.tenant_id),
            role_count=len(identity.roles),
            permission_count=len(identity.permissions),
        )
        return identity
