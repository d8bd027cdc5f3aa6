"""Transaction Entity - payment record with the approval rule.

Invariants:
    - amount is a Decimal strictly greater than 0 ("Amount must be greater than 0"),
      with at most 2 decimal places and below MONEY_LIMIT (what the column stores)
    - open() is the only way a use case starts a transaction: status is PENDING
    - Transitions follow ALLOWED_TRANSITIONS: pending -> approved | declined, nothing else
    - approve/decline/process are PURE: they return a new Transaction, never mutate self
    - process(): amount >= APPROVAL_THRESHOLD -> approved, otherwise declined (100 is approved)

Design Decisions:
    - Frozen dataclass: direct writes to status raise FrozenInstanceError, so the
      named transitions are the only path to a new status
    - Constructor still accepts any status: repositories rehydrate persisted rows
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from commerce.core.domain_types import (
    APPROVAL_THRESHOLD, ALLOWED_TRANSITIONS, TransactionStatus, to_decimal,
)
from commerce.core.entity import Entity, require_money, require_text, utcnow
from commerce.core.errors import DomainInvariantError, InvalidTransitionError


@dataclass(frozen=True, kw_only=True)
class Transaction(Entity):
    """Payment transaction for one order."""
    order_id: str
    amount: Decimal
    status: TransactionStatus = TransactionStatus.PENDING

    def __post_init__(self) -> None:
        super().__post_init__()
        require_text(self.order_id, "order_id", "Order id")
        if isinstance(self.amount, bool) or not isinstance(
            self.amount, (int, float, Decimal),
        ):
            raise DomainInvariantError("Amount must be a number", "amount")
        object.__setattr__(
            self, "amount", require_money(to_decimal(self.amount), "amount", "Amount"),
        )
        try:
            object.__setattr__(self, "status", TransactionStatus(self.status))
        except ValueError:
            raise DomainInvariantError(
                f"Unknown transaction status: {self.status!r}", "status",
            )

    @classmethod
    def open(
        cls, order_id: str, amount: Decimal | float | int, id: str | None = None,
    ) -> "Transaction":
        """Start a new transaction in PENDING state."""
        return cls(id=id, order_id=order_id, amount=amount)

    @property
    def is_final(self) -> bool:
        return not ALLOWED_TRANSITIONS[self.status]

    def approve(self) -> "Transaction":
        return self._transition(TransactionStatus.APPROVED)

    def decline(self) -> "Transaction":
        return self._transition(TransactionStatus.DECLINED)

    def process(self) -> "Transaction":
        """Apply the approval rule."""
        if self.amount >= APPROVAL_THRESHOLD:
            return self.approve()
        return self.decline()

    def _transition(self, target: TransactionStatus) -> "Transaction":
        if target not in ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(self.status.value, target.value)
        return replace(self, status=target, updated_at=utcnow())
