"""SQLAlchemy ORM model for the branches table."""

from decimal import Decimal

from sqlalchemy import BigInteger, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin, TenantScopedMixin


class BranchModel(Base, TenantScopedMixin, TimestampMixin):
    """ORM model for branches table.

    Branch names are unique within a tenant; the route checks this before
    inserting.
    """

    __tablename__ = "branches"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    name_ar: Mapped[str | None] = mapped_column(String(200), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 7), nullable=True)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 7), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<BranchModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"name={self.name})>"
        )
