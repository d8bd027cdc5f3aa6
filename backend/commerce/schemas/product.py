"""Product Schemas - administration request and response shapes.

Invariants:
    - purchasePrice > 0 with at most 2 decimal places, stock integer >= 0
    - StockResponse never carries a price of any kind
"""

from pydantic import BaseModel, Field

from commerce.schemas import CAMEL_CONFIG, Money


class AddProductInput(BaseModel):
    """POST /products body."""
    model_config = CAMEL_CONFIG

    id: str | None = Field(None, strict=True, min_length=1)
    name: str = Field(strict=True, min_length=1)
    description: str = Field(strict=True, min_length=1)
    purchase_price: Money
    stock: int = Field(strict=True, ge=0)


class StockResponse(BaseModel):
    """GET /products/{id}/stock projection."""
    model_config = CAMEL_CONFIG

    product_id: str
    stock: int
