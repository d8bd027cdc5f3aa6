"""Module Facades - one entry object per module, one method per use case.

Invariants:
    - Every method delegates to exactly one use case and returns its result unchanged
    - Errors propagate untouched (no try/except here)
    - Facades hold no mutable state; a fresh one is built per request (api/dependencies.py)
"""

from commerce.schemas.catalog import CatalogListResponse, CatalogProductResponse
from commerce.schemas.client import AddClientInput, ClientResponse
from commerce.schemas.payment import PaymentResponse, ProcessPaymentInput
from commerce.schemas.product import AddProductInput, StockResponse
from commerce.services.client_admin import AddClientUseCase, FindClientUseCase
from commerce.services.payment import ProcessPaymentUseCase
from commerce.services.product_admin import AddProductUseCase, CheckStockUseCase
from commerce.services.store_catalog import (
    FindAllCatalogProductsUseCase, FindCatalogProductUseCase,
)


class ClientAdminFacade:
    def __init__(self, add_use_case: AddClientUseCase, find_use_case: FindClientUseCase):
        self._add = add_use_case
        self._find = find_use_case

    async def add(self, data: AddClientInput) -> None:
        await self._add.execute(data)

    async def find(self, client_id: str) -> ClientResponse:
        return await self._find.execute(client_id)


class ProductAdminFacade:
    def __init__(
        self, add_use_case: AddProductUseCase, check_stock_use_case: CheckStockUseCase,
    ):
        self._add = add_use_case
        self._check_stock = check_stock_use_case

    async def add_product(self, data: AddProductInput) -> None:
        await self._add.execute(data)

    async def check_stock(self, product_id: str) -> StockResponse:
        return await self._check_stock.execute(product_id)


class StoreCatalogFacade:
    def __init__(
        self,
        find_use_case: FindCatalogProductUseCase,
        find_all_use_case: FindAllCatalogProductsUseCase,
    ):
        self._find = find_use_case
        self._find_all = find_all_use_case

    async def find(self, product_id: str) -> CatalogProductResponse:
        return await self._find.execute(product_id)

    async def find_all(self) -> CatalogListResponse:
        return await self._find_all.execute()


class PaymentFacade:
    def __init__(self, process_use_case: ProcessPaymentUseCase):
        self._process = process_use_case

    async def process(self, data: ProcessPaymentInput) -> PaymentResponse:
        return await self._process.execute(data)
