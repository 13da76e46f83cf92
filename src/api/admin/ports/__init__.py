"""Ports (interfaces) for the admin bounded context.

Ports define the contracts for repositories without specifying
implementation details.
"""

from admin.ports.exceptions import (
    BranchNotInTenantError,
    DuplicateBranchNameError,
    DuplicateSkuError,
)
from admin.ports.repositories import (
    CustomerChanges,
    IBranchRepository,
    ICustomerRepository,
    IProductRepository,
    ListQuery,
    NewBranch,
    NewCustomer,
    NewProduct,
    Page,
    SortOrder,
)

__all__ = [
    "BranchNotInTenantError",
    "CustomerChanges",
    "DuplicateBranchNameError",
    "DuplicateSkuError",
    "IBranchRepository",
    "ICustomerRepository",
    "IProductRepository",
    "ListQuery",
    "NewBranch",
    "NewCustomer",
    "NewProduct",
    "Page",
    "SortOrder",
]
