"""Product Repository - administration view of the products table.

Invariants:
    - Never reads or writes sales_price (catalog-owned column)
    - Upsert leaves sales_price and created_at untouched on existing rows
      (merge copies only set attributes)
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.core.errors import ConflictError
from commerce.core.product import Product
from commerce.models.product import ProductRow


class SqlProductRepository:
    """ProductRepository backed by the products table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, product: Product) -> None:
        row = ProductRow(
            id=product.id,
            name=product.name,
            description=product.description,
            purchase_price=product.purchase_price,
            stock=product.stock,
            updated_at=product.updated_at,
        )
        if await self._db.get(ProductRow, product.id) is None:
            row.created_at = product.created_at
        try:
            await self._db.merge(row)
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            raise ConflictError(f"Product '{product.id}' could not be stored")

    async def find_by_id(self, product_id: str) -> Product | None:
        row = await self._db.get(ProductRow, product_id)
        return _to_entity(row) if row else None

    async def find_all(self) -> list[Product]:
        result = await self._db.execute(
            select(ProductRow).order_by(ProductRow.created_at),
        )
        return [_to_entity(row) for row in result.scalars().all()]


def _to_entity(row: ProductRow) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        description=row.description,
        purchase_price=row.purchase_price,
        stock=row.stock,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
