"""Transaction ORM - persists payment decisions.

Invariants:
    - Rows are written once, in their final state (approved | declined)
    - amount > 0 and status in the known set, enforced by CHECK constraints as well
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import CheckConstraint, String, Numeric, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from commerce.db.base import Base


class TransactionRow(Base):
    """transactions table."""
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        CheckConstraint(
            "status IN ('pending', 'approved', 'declined')",
            name="ck_transactions_status_known",
        ),
    )

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    order_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="pending", index=True,
    )
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
