"""Product ORM - one row backs both the administration and the catalog views.

Invariants:
    - purchase_price is read/written only by the administration repository
    - sales_price is read only by the catalog repository
    - both price columns are nullable: each view populates its own subset
    - stock defaults to 0

Design Decisions:
    - Single table, two projections (ADR: modules share storage, not entities)
    - Numeric(10, 2) for money: exact decimals, no float rounding on storage
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Integer, Numeric, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from commerce.db.base import Base


class ProductRow(Base):
    """products table."""
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    purchase_price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True,
    )
    sales_price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True,
    )
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
