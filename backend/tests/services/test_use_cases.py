"""Use Cases & Facades - orchestration over in-memory repositories.

Tests cover:
    - Add use cases build the entity and save exactly once
    - Find use cases turn a miss into ResourceNotFoundError
    - ProcessPayment saves once, in the final state, and answers from what was saved
    - Facades delegate and propagate errors unchanged
"""

from decimal import Decimal

import pytest

from commerce.core.catalog import CatalogProduct
from commerce.core.client import Client
from commerce.core.domain_types import TransactionStatus
from commerce.core.errors import DomainInvariantError, ResourceNotFoundError
from commerce.core.product import Product
from commerce.schemas.client import AddClientInput
from commerce.schemas.payment import ProcessPaymentInput
from commerce.schemas.product import AddProductInput
from commerce.services.client_admin import AddClientUseCase, FindClientUseCase
from commerce.services.facades import (
    ClientAdminFacade, PaymentFacade, ProductAdminFacade, StoreCatalogFacade,
)
from commerce.services.payment import ProcessPaymentUseCase
from commerce.services.product_admin import AddProductUseCase, CheckStockUseCase
from commerce.services.store_catalog import (
    FindAllCatalogProductsUseCase, FindCatalogProductUseCase,
)
from tests.services.fakes import InMemoryRepository


# ─── client administration ───────────────────────────────────────

async def test_add_client_saves_once_with_generated_id():
    repo = InMemoryRepository()
    data = AddClientInput(name="Maria", email="maria@example.com", address="42 Flower St")
    result = await AddClientUseCase(repo).execute(data)
    assert result is None
    assert len(repo.saved) == 1
    assert len(repo.saved[0].id) == 36


async def test_add_client_twice_without_id_creates_two_records():
    repo = InMemoryRepository()
    use_case = AddClientUseCase(repo)
    await use_case.execute(AddClientInput(name="A", email="a@example.com", address="x"))
    await use_case.execute(AddClientInput(name="B", email="b@example.com", address="y"))
    assert len(repo.items) == 2


async def test_add_client_blank_name_never_reaches_repository():
    repo = InMemoryRepository()
    with pytest.raises(DomainInvariantError):
        await AddClientUseCase(repo).execute(
            AddClientInput(name="   ", email="a@example.com", address="x"),
        )
    assert repo.saved == []


async def test_find_client_projects_all_fields():
    client = Client(id="c1", name="Ana", email="ana@example.com", address="7 Green St")
    result = await FindClientUseCase(InMemoryRepository([client])).execute("c1")
    assert result.id == "c1"
    assert result.email == "ana@example.com"
    assert result.created_at == client.created_at


async def test_find_client_miss_raises_not_found():
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await FindClientUseCase(InMemoryRepository()).execute("nope")
    assert "not found" in exc_info.value.message


# ─── product administration ──────────────────────────────────────

async def test_add_product_converts_price_to_decimal():
    repo = InMemoryRepository()
    await AddProductUseCase(repo).execute(AddProductInput(
        id="p1", name="Mouse", description="d", purchase_price=120.5, stock=50,
    ))
    assert repo.items["p1"].purchase_price == Decimal("120.5")


async def test_check_stock_returns_id_and_stock_only():
    product = Product(id="p1", name="Mouse", description="d", purchase_price=10, stock=30)
    result = await CheckStockUseCase(InMemoryRepository([product])).execute("p1")
    assert result.model_dump(by_alias=True) == {"productId": "p1", "stock": 30}


async def test_check_stock_miss_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        await CheckStockUseCase(InMemoryRepository()).execute("missing")


# ─── store catalog ───────────────────────────────────────────────

async def test_catalog_find_all_projects_sales_price():
    repo = InMemoryRepository([
        CatalogProduct(id="a", name="Chair", description="c", sales_price=Decimal("899.90")),
        CatalogProduct(id="b", name="Desk", description="d", sales_price=None),
    ])
    result = await FindAllCatalogProductsUseCase(repo).execute()
    dumped = result.model_dump(by_alias=True)
    assert [p["salesPrice"] for p in dumped["products"]] == [899.9, None]
    assert all("purchasePrice" not in p for p in dumped["products"])


async def test_catalog_find_miss_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        await FindCatalogProductUseCase(InMemoryRepository()).execute("x")


# ─── payment ─────────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (150, TransactionStatus.APPROVED),
        (100, TransactionStatus.APPROVED),
        (99.99, TransactionStatus.DECLINED),
        (50, TransactionStatus.DECLINED),
    ],
)
async def test_process_payment_decides_then_saves_once(amount, expected):
    repo = InMemoryRepository()
    result = await ProcessPaymentUseCase(repo).execute(
        ProcessPaymentInput(order_id="o1", amount=amount),
    )
    assert len(repo.saved) == 1
    assert repo.saved[0].status == expected
    assert result.status == expected
    assert result.transaction_id == repo.saved[0].id
    assert result.amount == amount


async def test_process_payment_never_persists_pending():
    repo = InMemoryRepository()
    await ProcessPaymentUseCase(repo).execute(ProcessPaymentInput(order_id="o", amount=1))
    assert all(t.status != TransactionStatus.PENDING for t in repo.saved)


async def test_process_payment_responds_with_saved_state():
    class StoringRepository(InMemoryRepository):
        async def save(self, entity):
            await super().save(entity)
            return entity.__class__(
                id="stored-id", order_id=entity.order_id, amount=entity.amount,
                status=entity.status,
            )

    result = await ProcessPaymentUseCase(StoringRepository()).execute(
        ProcessPaymentInput(order_id="o", amount=200),
    )
    assert result.transaction_id == "stored-id"


# ─── facades ─────────────────────────────────────────────────────

async def test_client_facade_delegates_and_propagates():
    repo = InMemoryRepository()
    facade = ClientAdminFacade(AddClientUseCase(repo), FindClientUseCase(repo))
    await facade.add(AddClientInput(id="c1", name="N", email="n@example.com", address="A"))
    assert (await facade.find("c1")).name == "N"
    with pytest.raises(ResourceNotFoundError):
        await facade.find("c2")


async def test_product_facade_delegates():
    repo = InMemoryRepository()
    facade = ProductAdminFacade(AddProductUseCase(repo), CheckStockUseCase(repo))
    await facade.add_product(AddProductInput(
        id="p1", name="X", description="d", purchase_price=10, stock=15,
    ))
    assert (await facade.check_stock("p1")).stock == 15


async def test_catalog_facade_delegates():
    repo = InMemoryRepository([
        CatalogProduct(id="a", name="Chair", description="c", sales_price=Decimal("10")),
    ])
    facade = StoreCatalogFacade(
        FindCatalogProductUseCase(repo), FindAllCatalogProductsUseCase(repo),
    )
    assert (await facade.find("a")).name == "Chair"
    assert len((await facade.find_all()).products) == 1


async def test_payment_facade_delegates():
    facade = PaymentFacade(ProcessPaymentUseCase(InMemoryRepository()))
    result = await facade.process(ProcessPaymentInput(order_id="o", amount=150))
    assert result.status == TransactionStatus.APPROVED
