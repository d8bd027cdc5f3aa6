"""Catalog Schemas - storefront projections.

Invariants:
    - purchasePrice and stock are never part of a catalog response
"""

from pydantic import BaseModel

from commerce.schemas import CAMEL_CONFIG


class CatalogProductResponse(BaseModel):
    """One storefront product."""
    model_config = CAMEL_CONFIG

    id: str
    name: str
    description: str | None
    sales_price: float | None


class CatalogListResponse(BaseModel):
    """GET /catalog/products body."""
    products: list[CatalogProductResponse]
