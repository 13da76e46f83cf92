"""seed permission codes

Insert the permission codes checked by the admin API so that roles can
be granted them. Codes are copied here rather than imported so the
migration keeps working if the application enum changes later.

Revision ID: c7d35e90a412
Revises: 8c4e2b61d0f7
Create Date: 2026-10-19 09:48:52.630174

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "c7d35e90a412"
down_revision: Union[str, Sequence[str], None] = "8c4e2b61d0f7"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PERMISSION_CODES = [
    ("create_branch", "Create branches"),
    ("view_branches", "List branches"),
    ("delete_branch", "Delete branches"),
    ("create_product", "Create products"),
    ("view_products", "List products"),
    ("edit_product", "Edit products"),
    ("delete_product", "Delete products"),
    ("create_customer", "Create customers"),
    ("view_customers", "List customers"),
    ("edit_customer", "Edit customers"),
    ("delete_customer", "Delete customers"),
    ("view_roles", "List roles"),
    ("dashboard.access", "Open the dashboard"),
]

permissions = sa.table(
    "permissions",
    sa.column("code", sa.String),
    sa.column("description", sa.String),
)


def upgrade() -> None:
    """Upgrade schema."""
    op.bulk_insert(
        permissions,
        [{"code": code, "description": description} for code, description in PERMISSION_CODES],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        permissions.delete().where(
            permissions.c.code.in_([code for code, _ in PERMISSION_CODES])
        )
    )
