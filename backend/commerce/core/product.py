"""Product Entity (administration view) - purchase price and stock.

Invariants:
    - purchase_price is a Decimal strictly greater than 0, in cents, below MONEY_LIMIT
    - stock is an int (bool rejected) greater than or equal to 0
    - Violations fail construction immediately with DomainInvariantError
"""

from dataclasses import dataclass
from decimal import Decimal

from commerce.core.domain_types import to_decimal
from commerce.core.entity import Entity, require_money, require_text
from commerce.core.errors import DomainInvariantError


@dataclass(frozen=True, kw_only=True)
class Product(Entity):
    """Administered product. Stock is read, never mutated, in this service."""
    name: str
    description: str
    purchase_price: Decimal
    stock: int

    def __post_init__(self) -> None:
        super().__post_init__()
        require_text(self.name, "name", "Name")
        require_text(self.description, "description", "Description")
        object.__setattr__(self, "purchase_price", require_money(
            to_decimal(self.purchase_price), "purchase_price", "Purchase price",
        ))
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise DomainInvariantError("Stock must be an integer", "stock")
        if self.stock < 0:
            raise DomainInvariantError(
                "Stock must be greater than or equal to 0", "stock",
            )
