"""Entity Base - identity and timestamps shared by every domain record.

Invariants:
    - id is never empty after construction (generated when absent)
    - updated_at defaults to created_at, so a fresh entity has equal timestamps
    - Entities are frozen: fields change only through named methods returning new values

Design Decisions:
    - kw_only dataclass base: subclasses declare required fields without default-ordering issues
    - object.__setattr__ in __post_init__ is the one sanctioned write on a frozen instance
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from commerce.core.domain_types import MONEY_LIMIT, MONEY_QUANTUM, new_id
from commerce.core.errors import DomainInvariantError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class Entity:
    """Identity + timestamps. Pure, no IO."""
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", new_id())
        if self.created_at is None:
            object.__setattr__(self, "created_at", utcnow())
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)


def require_text(value: object, field_name: str, label: str) -> str:
    """Non-empty string check shared by entity constructors."""
    if not isinstance(value, str) or not value.strip():
        raise DomainInvariantError(f"{label} must not be empty", field_name)
    return value


def require_money(value: Decimal, field_name: str, label: str) -> Decimal:
    """Positive amount that round-trips through a NUMERIC(10, 2) column unchanged."""
    if value <= 0:
        raise DomainInvariantError(f"{label} must be greater than 0", field_name)
    if value >= MONEY_LIMIT:
        raise DomainInvariantError(
            f"{label} must be less than {MONEY_LIMIT}", field_name,
        )
    if value != value.quantize(MONEY_QUANTUM):
        raise DomainInvariantError(
            f"{label} must have at most 2 decimal places", field_name,
        )
    return value
