"""Client Routes - client administration endpoints.

Invariants:
    - POST validates the raw body before the facade is touched (400 on any violation)
    - GET miss -> 404 via ResourceNotFoundError, chosen by type
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from commerce.api.dependencies import client_admin_facade
from commerce.core.validation import validate_payload
from commerce.schemas.client import AddClientInput, ClientResponse
from commerce.schemas.common import MessageResponse
from commerce.services.facades import ClientAdminFacade

router = APIRouter(prefix="/clients", tags=["clients"])


@router.post(
    "", response_model=MessageResponse, status_code=status.HTTP_201_CREATED,
)
async def add_client(
    payload: dict[str, Any] = Body(...),
    facade: ClientAdminFacade = Depends(client_admin_facade),
):
    """Create a client. id is optional."""
    data = validate_payload(AddClientInput, payload)
    await facade.add(data)
    return MessageResponse(message="Client created successfully")


@router.get("/{client_id}", response_model=ClientResponse)
async def find_client(
    client_id: str, facade: ClientAdminFacade = Depends(client_admin_facade),
):
    return await facade.find(client_id)
