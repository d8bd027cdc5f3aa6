"""Transaction Repository - transactions table <-> Transaction entity."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.core.transaction import Transaction
from commerce.models.transaction import TransactionRow


class SqlTransactionRepository:
    """TransactionRepository backed by the transactions table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, transaction: Transaction) -> Transaction:
        """Upsert and return the entity as stored (amount at column precision)."""
        row = await self._db.merge(TransactionRow(
            id=transaction.id,
            order_id=transaction.order_id,
            amount=transaction.amount,
            status=transaction.status.value,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        ))
        await self._db.commit()
        await self._db.refresh(row)
        return _to_entity(row)

    async def find_by_id(self, transaction_id: str) -> Transaction | None:
        row = await self._db.get(TransactionRow, transaction_id)
        return _to_entity(row) if row else None

    async def find_all(self) -> list[Transaction]:
        result = await self._db.execute(
            select(TransactionRow).order_by(TransactionRow.created_at),
        )
        return [_to_entity(row) for row in result.scalars().all()]


def _to_entity(row: TransactionRow) -> Transaction:
    return Transaction(
        id=row.id,
        order_id=row.order_id,
        amount=row.amount,
        status=row.status,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
