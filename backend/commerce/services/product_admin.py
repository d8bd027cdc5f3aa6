"""Product Administration Use Cases - add products, check stock.

Invariants:
    - AddProduct: Product construction enforces price > 0 and stock >= 0; one write
    - CheckStock: returns {productId, stock} only, a miss raises ResourceNotFoundError
"""

import logging

from commerce.core.errors import ResourceNotFoundError
from commerce.core.product import Product
from commerce.core.repository_protocols import ProductRepository
from commerce.schemas.product import AddProductInput, StockResponse

logger = logging.getLogger(__name__)


class AddProductUseCase:
    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def execute(self, data: AddProductInput) -> None:
        product = Product(
            id=data.id,
            name=data.name,
            description=data.description,
            purchase_price=data.purchase_price,
            stock=data.stock,
        )
        await self._repository.save(product)
        logger.info("Product added", extra={"entity_id": product.id})


class CheckStockUseCase:
    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def execute(self, product_id: str) -> StockResponse:
        product = await self._repository.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return StockResponse(product_id=product.id, stock=product.stock)
