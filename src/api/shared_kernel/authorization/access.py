"""Pure authorization decisions.

Both functions are side-effect free and never raise: any missing,
malformed or ambiguous input is a denial.
"""

from __future__ import annotations

from typing import Any

from shared_kernel.authorization.identity import Identity, TenantIdValue


def has_permission(identity: Identity | None, code: str | None) -> bool:
    """Return True when ``identity`` holds the permission ``code``."""
    if identity is None or not code:
        return False
    return code in identity.permissions


def normalize_tenant_id(value: Any) -> TenantIdValue | None:
    """Normalize a tenant identifier for comparison.

    Integers, integral floats and digit strings become ``int``; other
    non-empty strings are stripped. Everything else (including ``bool``)
    is not a tenant id and yields ``None``. So does a digit string too
    long for ``int`` to parse.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.isdecimal():
            try:
                return int(text)
            except ValueError:
                # Beyond the interpreter's int conversion digit limit
                return None
        return text
    return None


def has_tenant_access(identity: Identity | None, tenant_id: Any) -> bool:
    """Return True when ``identity`` may act within ``tenant_id``.

    Super-admins may act in any tenant; everyone else only in their own.
    """
    if identity is None:
        return False

    requested = normalize_tenant_id(tenant_id)
    if requested is None:
        return False

    if identity.is_super_admin:
        return True

    home = normalize_tenant_id(identity.tenant_id)
    if home is None:
        return False
    return type(home) is type(requested) and home == requested
