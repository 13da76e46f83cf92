"""Exceptions for the admin bounded context.

Repositories raise these when a tenant-level uniqueness or ownership
rule is violated. Routes translate them into localized HTTP errors.
"""


class DuplicateSkuError(Exception):
    """Raised when a product SKU already exists in the tenant."""

    pass


class DuplicateBranchNameError(Exception):
    """Raised when a branch name already exists in the tenant."""

    pass


class BranchNotInTenantError(Exception):
    """Raised when a referenced branch does not belong to the tenant.

    Customers may only be attached to branches of their own tenant.
    """

    pass
