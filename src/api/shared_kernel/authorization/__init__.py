"""Authorization primitives for permission and tenant-scope checks.

This module provides the identity value object, the pure permission and
tenant access decisions, and the enforcement policy shared by every
bounded context that serves tenant-scoped data.
"""

from shared_kernel.authorization.access import (
    has_permission,
    has_tenant_access,
    normalize_tenant_id,
)
from shared_kernel.authorization.identity import Identity
from shared_kernel.authorization.policy import EnforcementPolicy
from shared_kernel.authorization.types import Permission, RoleSlug

__all__ = [
    "EnforcementPolicy",
    "Identity",
    "Permission",
    "RoleSlug",
    "has_permission",
    "has_tenant_access",
    "normalize_tenant_id",
]
