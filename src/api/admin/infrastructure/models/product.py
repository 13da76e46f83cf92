"""SQLAlchemy ORM model for the products table."""

from decimal import Decimal

from sqlalchemy import BigInteger, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin, TenantScopedMixin


class ProductModel(Base, TenantScopedMixin, TimestampMixin):
    """ORM model for products table.

    SKU is unique per tenant. The unique constraint backs up the
    existence check made before insert.
    """

    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("tenant_id", "sku", name="uq_products_tenant_sku"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    sku: Mapped[str] = mapped_column(String(100), nullable=False)
    barcode: Mapped[str | None] = mapped_column(String(100), nullable=True)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    product_name_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str | None] = mapped_column(String(150), nullable=True)
    category_ar: Mapped[str | None] = mapped_column(String(150), nullable=True)
    base_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ProductModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"sku={self.sku})>"
        )
