"""Store Catalog Use Cases - read-only storefront queries."""

from commerce.core.catalog import CatalogProduct
from commerce.core.errors import ResourceNotFoundError
from commerce.core.repository_protocols import CatalogRepository
from commerce.schemas.catalog import CatalogListResponse, CatalogProductResponse


def _project(product: CatalogProduct) -> CatalogProductResponse:
    return CatalogProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        sales_price=product.sales_price,
    )


class FindCatalogProductUseCase:
    def __init__(self, repository: CatalogRepository):
        self._repository = repository

    async def execute(self, product_id: str) -> CatalogProductResponse:
        product = await self._repository.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return _project(product)


class FindAllCatalogProductsUseCase:
    def __init__(self, repository: CatalogRepository):
        self._repository = repository

    async def execute(self) -> CatalogListResponse:
        products = await self._repository.find_all()
        return CatalogListResponse(products=[_project(p) for p in products])
