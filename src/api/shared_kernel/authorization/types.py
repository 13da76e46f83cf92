"""Authorization type definitions.

Permission codes and role slugs are stored as plain strings in the
``permissions`` and ``roles`` tables. These enums name the ones the
application checks so routes never hardcode them.
"""

from enum import StrEnum


class Permission(StrEnum):
    """Permission codes checked by the admin API.

    Each value corresponds to a row in the ``permissions`` table
    (column ``code``).
    """

    CREATE_BRANCH = "create_branch"
    VIEW_BRANCHES = "view_branches"
    DELETE_BRANCH = "delete_branch"
    CREATE_PRODUCT = "create_product"
    VIEW_PRODUCTS = "view_products"
    EDIT_PRODUCT = "edit_product"
    DELETE_PRODUCT = "delete_product"
    CREATE_CUSTOMER = "create_customer"
    VIEW_CUSTOMERS = "view_customers"
    EDIT_CUSTOMER = "edit_customer"
    DELETE_CUSTOMER = "delete_customer"
    VIEW_ROLES = "view_roles"
    DASHBOARD_ACCESS = "dashboard.access"


class RoleSlug(StrEnum):
    """Role slugs with meaning to the authorization layer."""

    SUPER_ADMIN = "super_admin"
