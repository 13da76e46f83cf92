"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for loading identities and
reading role data. Implementations live in ``iam.infrastructure``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from shared_kernel.authorization import Identity

if TYPE_CHECKING:
    from iam.infrastructure.models import RoleModel


@runtime_checkable
class IIdentityRepository(Protocol):
    """Loads the Identity of an authenticated user.

    Loading is I/O and belongs here; deciding what the Identity may do is
    the pure job of ``shared_kernel.authorization.access``.
    """

    async def load(self, user_id: int) -> Identity | None:
        """Load the identity of an active user.

        Args:
            user_id: The user's primary key

        Returns:
            The Identity, or None if the user is missing or not active
        """
        ...


@runtime_checkable
class IRoleRepository(Protocol):
    """Read access to tenant roles."""

    async def list_by_tenant(self, tenant_id: int) -> list[RoleModel]:
        """List every role of a tenant."""
        ...
