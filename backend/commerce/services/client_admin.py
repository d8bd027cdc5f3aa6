"""Client Administration Use Cases - add and find clients.

Invariants:
    - AddClient: entity construction is the only business check; one write; returns None
    - FindClient: a repository miss becomes ResourceNotFoundError
"""

import logging

from commerce.core.client import Client
from commerce.core.errors import ResourceNotFoundError
from commerce.core.repository_protocols import ClientRepository
from commerce.schemas.client import AddClientInput, ClientResponse

logger = logging.getLogger(__name__)


class AddClientUseCase:
    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def execute(self, data: AddClientInput) -> None:
        client = Client(
            id=data.id, name=data.name, email=data.email, address=data.address,
        )
        await self._repository.save(client)
        logger.info("Client added", extra={"entity_id": client.id})


class FindClientUseCase:
    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def execute(self, client_id: str) -> ClientResponse:
        client = await self._repository.find_by_id(client_id)
        if client is None:
            raise ResourceNotFoundError("Client", client_id)
        return ClientResponse(
            id=client.id,
            name=client.name,
            email=client.email,
            address=client.address,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )
