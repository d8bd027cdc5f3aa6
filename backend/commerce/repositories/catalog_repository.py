"""Catalog Repository - storefront read path over the products table.

Invariants:
    - Read-only: no save
    - Selects only catalog columns; purchase_price and stock are never loaded
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.core.catalog import CatalogProduct
from commerce.models.product import ProductRow

_CATALOG_COLUMNS = (
    ProductRow.id, ProductRow.name, ProductRow.description, ProductRow.sales_price,
)


class SqlCatalogRepository:
    """CatalogRepository backed by the products table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_id(self, product_id: str) -> CatalogProduct | None:
        result = await self._db.execute(
            select(*_CATALOG_COLUMNS).where(ProductRow.id == product_id),
        )
        row = result.one_or_none()
        return _to_entity(row) if row else None

    async def find_all(self) -> list[CatalogProduct]:
        result = await self._db.execute(
            select(*_CATALOG_COLUMNS).order_by(ProductRow.name),
        )
        return [_to_entity(row) for row in result.all()]


def _to_entity(row) -> CatalogProduct:
    return CatalogProduct(
        id=row.id,
        name=row.name,
        description=row.description,
        sales_price=row.sales_price,
    )
