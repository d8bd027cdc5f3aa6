"""Client Repository - clients table <-> Client entity."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.core.client import Client
from commerce.core.errors import ConflictError
from commerce.models.client import ClientRow

logger = logging.getLogger(__name__)


class SqlClientRepository:
    """ClientRepository backed by the clients table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, client: Client) -> None:
        row = ClientRow(
            id=client.id,
            name=client.name,
            email=client.email,
            address=client.address,
            updated_at=client.updated_at,
        )
        # an existing row keeps its creation time
        if await self._db.get(ClientRow, client.id) is None:
            row.created_at = client.created_at
        try:
            await self._db.merge(row)
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            logger.warning(
                "Client email already registered",
                extra={"entity_id": client.id},
            )
            raise ConflictError("A client with this email already exists")

    async def find_by_id(self, client_id: str) -> Client | None:
        row = await self._db.get(ClientRow, client_id)
        return _to_entity(row) if row else None

    async def find_all(self) -> list[Client]:
        result = await self._db.execute(
            select(ClientRow).order_by(ClientRow.created_at),
        )
        return [_to_entity(row) for row in result.scalars().all()]


def _to_entity(row: ClientRow) -> Client:
    return Client(
        id=row.id,
        name=row.name,
        email=row.email,
        address=row.address,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
