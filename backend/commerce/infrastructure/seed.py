"""Sample Data - demo clients and products for local development.

Invariants:
    - Idempotent: rows whose id (or client email) already exists are skipped
    - Seeded products carry both purchase and sales prices, so the catalog has data

Design Decisions:
    - Opt-in via SEED_SAMPLE_DATA: never runs against production by default
"""

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.models.client import ClientRow
from commerce.models.product import ProductRow

logger = logging.getLogger(__name__)

SAMPLE_CLIENTS: tuple[dict, ...] = (
    {
        "id": "550e8400-e29b-41d4-a716-446655440001",
        "name": "John Doe",
        "email": "john.doe@example.com",
        "address": "123 Main St, Anytown, USA",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440002",
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "address": "456 Oak Ave, Somewhere, USA",
    },
)

SAMPLE_PRODUCTS: tuple[dict, ...] = (
    {
        "id": "660e8400-e29b-41d4-a716-446655440001",
        "name": "Laptop Pro",
        "description": "High-performance laptop for professionals",
        "purchase_price": Decimal("800.00"),
        "sales_price": Decimal("1200.00"),
        "stock": 50,
    },
    {
        "id": "660e8400-e29b-41d4-a716-446655440002",
        "name": "Wireless Mouse",
        "description": "Ergonomic wireless mouse with precision tracking",
        "purchase_price": Decimal("25.00"),
        "sales_price": Decimal("45.00"),
        "stock": 200,
    },
    {
        "id": "660e8400-e29b-41d4-a716-446655440003",
        "name": "Mechanical Keyboard",
        "description": "RGB backlit mechanical keyboard",
        "purchase_price": Decimal("80.00"),
        "sales_price": Decimal("120.00"),
        "stock": 75,
    },
)


async def seed_sample_data(db: AsyncSession) -> int:
    """Insert missing sample rows. Returns the number of rows inserted."""
    inserted = 0
    for data in SAMPLE_CLIENTS:
        result = await db.execute(
            select(ClientRow.id).where(
                (ClientRow.id == data["id"]) | (ClientRow.email == data["email"]),
            ),
        )
        if result.first() is None:
            db.add(ClientRow(**data))
            inserted += 1
    for data in SAMPLE_PRODUCTS:
        if await db.get(ProductRow, data["id"]) is None:
            db.add(ProductRow(**data))
            inserted += 1
    await db.commit()
    logger.info(f"Sample data seeded: {inserted} row(s) inserted")
    return inserted
