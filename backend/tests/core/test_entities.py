"""Client & Product Entities - construction invariants and identity defaults.

Tests cover:
    - id generated when absent, kept when supplied
    - timestamps default to the same instant
    - Client: non-empty name/address, valid email
    - Product: purchase price > 0, stock integer >= 0
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from commerce.core.catalog import CatalogProduct
from commerce.core.client import Client
from commerce.core.errors import DomainInvariantError
from commerce.core.product import Product


def _client(**overrides) -> Client:
    data = {"name": "Maria Silva", "email": "maria@example.com", "address": "42 Flower Street"}
    data.update(overrides)
    return Client(**data)


def _product(**overrides) -> Product:
    data = {
        "name": "Test Product", "description": "Test Description",
        "purchase_price": 100.5, "stock": 25,
    }
    data.update(overrides)
    return Product(**data)


# ─── identity ────────────────────────────────────────────────────

def test_entity_generates_id_when_absent():
    client = _client()
    assert isinstance(client.id, str)
    assert len(client.id) == 36


def test_entity_keeps_supplied_id():
    assert _client(id="custom-uuid-001").id == "custom-uuid-001"


def test_entity_timestamps_default_to_same_instant():
    client = _client()
    assert client.created_at is not None
    assert client.updated_at == client.created_at


def test_entity_keeps_supplied_timestamps():
    created = datetime(2023, 1, 1, tzinfo=timezone.utc)
    client = _client(created_at=created)
    assert client.created_at == created
    assert client.updated_at == created


# ─── Client ──────────────────────────────────────────────────────

def test_client_with_all_properties():
    client = _client(id="123")
    assert client.name == "Maria Silva"
    assert client.email == "maria@example.com"
    assert client.address == "42 Flower Street"


@pytest.mark.parametrize("field", ["name", "address"])
def test_client_rejects_blank_text(field):
    with pytest.raises(DomainInvariantError) as exc_info:
        _client(**{field: "   "})
    assert exc_info.value.field == field


@pytest.mark.parametrize("email", ["not-an-email", "a@", "@example.com", 42])
def test_client_rejects_invalid_email(email):
    with pytest.raises(DomainInvariantError) as exc_info:
        _client(email=email)
    assert exc_info.value.field == "email"


# ─── Product ─────────────────────────────────────────────────────

def test_product_with_all_properties():
    product = _product(id="123")
    assert product.id == "123"
    assert product.purchase_price == Decimal("100.5")
    assert product.stock == 25


def test_product_accepts_zero_stock():
    assert _product(stock=0).stock == 0


@pytest.mark.parametrize("price", [0, -1, Decimal("-0.5")])
def test_product_rejects_non_positive_price(price):
    with pytest.raises(DomainInvariantError, match="Purchase price must be greater than 0"):
        _product(purchase_price=price)


@pytest.mark.parametrize("price", [0.001, Decimal("19.999")])
def test_product_rejects_price_finer_than_cents(price):
    with pytest.raises(DomainInvariantError, match="at most 2 decimal places"):
        _product(purchase_price=price)


def test_product_rejects_price_beyond_storage_range():
    with pytest.raises(DomainInvariantError, match="must be less than"):
        _product(purchase_price=Decimal("100000000"))


def test_product_rejects_negative_stock():
    with pytest.raises(DomainInvariantError, match="greater than or equal to 0"):
        _product(stock=-1)


@pytest.mark.parametrize("stock", [1.5, True, "10"])
def test_product_rejects_non_integer_stock(stock):
    with pytest.raises(DomainInvariantError, match="integer"):
        _product(stock=stock)


def test_catalog_product_has_no_admin_fields():
    product = CatalogProduct(id="p1", name="Chair", description="d", sales_price=Decimal("899.90"))
    assert not hasattr(product, "purchase_price")
    assert not hasattr(product, "stock")
