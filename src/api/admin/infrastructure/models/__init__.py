"""SQLAlchemy ORM models for the admin bounded context.

These models map to database tables and are used by repository implementations.
"""

from admin.infrastructure.models.branch import BranchModel
from admin.infrastructure.models.customer import CustomerModel
from admin.infrastructure.models.product import ProductModel

__all__ = [
    "BranchModel",
    "CustomerModel",
    "ProductModel",
]
