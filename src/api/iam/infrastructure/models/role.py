"""SQLAlchemy ORM models for roles and permissions.

A role is tenant-scoped and identified by a slug. Permissions are global
capability codes; the role_permissions association grants them to roles.
"""

from sqlalchemy import BigInteger, Column, ForeignKey, String, Table, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, CreatedAtMixin, TenantScopedMixin

role_permissions = Table(
    "role_permissions",
    Base.metadata,
    Column(
        "role_id",
        BigInteger,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "permission_id",
        BigInteger,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class PermissionModel(Base):
    """ORM model for permissions table."""

    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<PermissionModel(id={self.id}, code={self.code})>"


class RoleModel(Base, TenantScopedMixin, CreatedAtMixin):
    """ORM model for roles table.

    Slugs are unique within a tenant. The ``super_admin`` slug grants
    cross-tenant access.
    """

    __tablename__ = "roles"
    __table_args__ = (
        UniqueConstraint("tenant_id", "slug", name="uq_roles_tenant_slug"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    name_ar: Mapped[str | None] = mapped_column(String(150), nullable=True)
    slug: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    permissions = relationship("PermissionModel", secondary=role_permissions)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<RoleModel(id={self.id}, tenant_id={self.tenant_id}, slug={self.slug})>"
