"""Facade Factories - wire Repository -> Use Case -> Facade for each request.

Invariants:
    - A fresh object graph per request: nothing here is cached or module-global
    - The request's AsyncSession (get_db) is the only collaborator shared inside one graph

Design Decisions:
    - FastAPI Depends over a process-wide factory singleton: tests swap get_db and
      the whole graph follows (ADR: explicit dependency construction)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.infrastructure.database import get_db
from commerce.repositories.catalog_repository import SqlCatalogRepository
from commerce.repositories.client_repository import SqlClientRepository
from commerce.repositories.product_repository import SqlProductRepository
from commerce.repositories.transaction_repository import SqlTransactionRepository
from commerce.services.client_admin import AddClientUseCase, FindClientUseCase
from commerce.services.facades import (
    ClientAdminFacade, PaymentFacade, ProductAdminFacade, StoreCatalogFacade,
)
from commerce.services.payment import ProcessPaymentUseCase
from commerce.services.product_admin import AddProductUseCase, CheckStockUseCase
from commerce.services.store_catalog import (
    FindAllCatalogProductsUseCase, FindCatalogProductUseCase,
)


def client_admin_facade(db: AsyncSession = Depends(get_db)) -> ClientAdminFacade:
    repository = SqlClientRepository(db)
    return ClientAdminFacade(
        AddClientUseCase(repository), FindClientUseCase(repository),
    )


def product_admin_facade(db: AsyncSession = Depends(get_db)) -> ProductAdminFacade:
    repository = SqlProductRepository(db)
    return ProductAdminFacade(
        AddProductUseCase(repository), CheckStockUseCase(repository),
    )


def store_catalog_facade(db: AsyncSession = Depends(get_db)) -> StoreCatalogFacade:
    repository = SqlCatalogRepository(db)
    return StoreCatalogFacade(
        FindCatalogProductUseCase(repository),
        FindAllCatalogProductsUseCase(repository),
    )


def payment_facade(db: AsyncSession = Depends(get_db)) -> PaymentFacade:
    return PaymentFacade(ProcessPaymentUseCase(SqlTransactionRepository(db)))
