"""SQLAlchemy ORM model for the customers table."""

from decimal import Decimal

from sqlalchemy import BigInteger, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from admin.infrastructure.models.branch import BranchModel
from infrastructure.database.models import Base, TimestampMixin, TenantScopedMixin


class CustomerModel(Base, TenantScopedMixin, TimestampMixin):
    """ORM model for customers table.

    A customer optionally belongs to a branch of the same tenant.
    """

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    branch_id: Mapped[int | None] = mapped_column(
        BigInteger,
        ForeignKey("branches.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    full_name_ar: Mapped[str | None] = mapped_column(String(200), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    credit_limit: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0")
    )

    branch: Mapped[BranchModel | None] = relationship(BranchModel, lazy="joined")

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<CustomerModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"full_name={self.full_name})>"
        )
