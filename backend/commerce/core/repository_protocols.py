"""Boundary Protocols - persistence contracts between use cases and storage.

Invariants:
    - Use cases depend on these Protocols, never on SQLAlchemy
    - save is an upsert by identifier (insert or replace)
    - find_by_id returns None on a miss; the caller decides whether that is an error
    - Every method is async: implementations do IO

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes in tests need no base class
    - One Protocol per entity type; same capability set {save, find_by_id, find_all}
    - Catalog is read-only: its Protocol has no save
"""

from typing import Protocol

from commerce.core.catalog import CatalogProduct
from commerce.core.client import Client
from commerce.core.product import Product
from commerce.core.transaction import Transaction


class ClientRepository(Protocol):
    """Contract for client persistence."""
    async def save(self, client: Client) -> None: ...
    async def find_by_id(self, client_id: str) -> Client | None: ...
    async def find_all(self) -> list[Client]: ...


class ProductRepository(Protocol):
    """Contract for administered product persistence."""
    async def save(self, product: Product) -> None: ...
    async def find_by_id(self, product_id: str) -> Product | None: ...
    async def find_all(self) -> list[Product]: ...


class CatalogRepository(Protocol):
    """Contract for the storefront read path over the products table."""
    async def find_by_id(self, product_id: str) -> CatalogProduct | None: ...
    async def find_all(self) -> list[CatalogProduct]: ...


class TransactionRepository(Protocol):
    """Contract for payment transaction persistence."""
    async def save(self, transaction: Transaction) -> Transaction: ...
    async def find_by_id(self, transaction_id: str) -> Transaction | None: ...
    async def find_all(self) -> list[Transaction]: ...
