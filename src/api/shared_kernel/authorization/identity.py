"""Authenticated identity value object.

An Identity is the already-resolved actor of a request: who they are,
which tenant they belong to, and the roles and permission codes loaded
for them. It is built per request by the IAM context and consumed by the
pure authorization decisions in ``shared_kernel.authorization.access``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from shared_kernel.authorization.types import RoleSlug

TenantIdValue = int | str


@dataclass(frozen=True)
class Identity:
    """Resolved authenticated actor.

    Attributes:
        user_id: Stable user identifier.
        tenant_id: The identity's home tenant.
        roles: Role slugs held by the user.
        permissions: Permission codes granted through those roles.
        email: User email, when known.
        name: Display name, when known.
    """

    user_id: str
    tenant_id: TenantIdValue | None
    roles: frozenset[str] = field(default_factory=frozenset)
    permissions: frozenset[str] = field(default_factory=frozenset)
    email: str | None = None
    name: str | None = None

    @classmethod
    def create(
        cls,
        user_id: str | int,
        tenant_id: TenantIdValue | None,
        roles: Iterable[str] = (),
        permissions: Iterable[str] = (),
        email: str | None = None,
        name: str | None = None,
    ) -> Identity:
        """Build an Identity, dropping empty role slugs and permission codes."""
        return cls(
            user_id=str(user_id),
            tenant_id=tenant_id,
            roles=frozenset(r for r in roles if r),
            permissions=frozenset(p for p in permissions if p),
            email=email,
            name=name,
        )

    @property
    def is_super_admin(self) -> bool:
        """True when the identity holds the super-admin role."""
        return RoleSlug.SUPER_ADMIN in self.roles
