"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ClientId, ProductId, TransactionId wrap canonical UUID strings (or caller-supplied ids)
    - TransactionStatus encodes every valid payment state; no raw string matching
    - APPROVAL_THRESHOLD is the single source of truth for the payment rule
    - MONEY_QUANTUM and MONEY_LIMIT mirror the money columns: every storable amount
      has at most 2 decimal places and is below MONEY_LIMIT

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Ids are str (not UUID): clients may supply arbitrary identifiers
"""

import uuid
from decimal import Decimal
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ClientId = NewType("ClientId", str)
ProductId = NewType("ProductId", str)
TransactionId = NewType("TransactionId", str)


def new_id() -> str:
    """Random 128-bit identifier in canonical form. Uniqueness is probabilistic."""
    return str(uuid.uuid4())


# ─── Value Types ─────────────────────────────────────────────────

APPROVAL_THRESHOLD: Decimal = Decimal("100")

# Money is stored as NUMERIC(10, 2): cents precision, below 10^8
MONEY_QUANTUM: Decimal = Decimal("0.01")
MONEY_LIMIT: Decimal = Decimal("100000000")


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Exact decimal from any numeric input (floats go through str to avoid binary noise)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


# ─── Enums ───────────────────────────────────────────────────────

class TransactionStatus(str, Enum):
    """Payment lifecycle states. Maps to DB `status` column."""
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"


# pending is the only state with outgoing edges
ALLOWED_TRANSITIONS: dict[TransactionStatus, frozenset[TransactionStatus]] = {
    TransactionStatus.PENDING: frozenset({
        TransactionStatus.APPROVED, TransactionStatus.DECLINED,
    }),
    TransactionStatus.APPROVED: frozenset(),
    TransactionStatus.DECLINED: frozenset(),
}
