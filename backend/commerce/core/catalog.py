"""Catalog Product - storefront read projection of a product row.

Invariants:
    - Never carries purchase_price or stock (administration-only fields)
    - sales_price may be None: products added through administration have no sales price yet
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CatalogProduct:
    """Read-only storefront view."""
    id: str
    name: str
    description: str | None
    sales_price: Decimal | None
