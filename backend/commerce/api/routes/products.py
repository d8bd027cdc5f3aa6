"""Product Routes - product administration endpoints.

Invariants:
    - Stock response is {productId, stock}; no price fields ever
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from commerce.api.dependencies import product_admin_facade
from commerce.core.validation import validate_payload
from commerce.schemas.common import MessageResponse
from commerce.schemas.product import AddProductInput, StockResponse
from commerce.services.facades import ProductAdminFacade

router = APIRouter(prefix="/products", tags=["products"])


@router.post(
    "", response_model=MessageResponse, status_code=status.HTTP_201_CREATED,
)
async def add_product(
    payload: dict[str, Any] = Body(...),
    facade: ProductAdminFacade = Depends(product_admin_facade),
):
    """Create a product with purchase price and initial stock."""
    data = validate_payload(AddProductInput, payload)
    await facade.add_product(data)
    return MessageResponse(message="Product created successfully")


@router.get("/{product_id}/stock", response_model=StockResponse)
async def check_stock(
    product_id: str, facade: ProductAdminFacade = Depends(product_admin_facade),
):
    return await facade.check_stock(product_id)
