"""Process Payment Use Case - decide, then persist once.

Invariants:
    - Sequence is fixed: open (pending, in memory) -> process() -> save -> respond
    - No pending row is ever written; the only write carries the final status
    - The response is built from what save returned (the persisted state)
"""

import logging

from commerce.core.repository_protocols import TransactionRepository
from commerce.core.transaction import Transaction
from commerce.schemas.payment import PaymentResponse, ProcessPaymentInput

logger = logging.getLogger(__name__)


class ProcessPaymentUseCase:
    def __init__(self, repository: TransactionRepository):
        self._repository = repository

    async def execute(self, data: ProcessPaymentInput) -> PaymentResponse:
        decided = Transaction.open(order_id=data.order_id, amount=data.amount).process()
        stored = await self._repository.save(decided)
        logger.info(
            f"Payment {stored.status.value}",
            extra={
                "entity_id": stored.id,
                "order_id": stored.order_id,
                "status": stored.status.value,
            },
        )
        return PaymentResponse(
            transaction_id=stored.id,
            order_id=stored.order_id,
            amount=stored.amount,
            status=stored.status,
            created_at=stored.created_at,
            updated_at=stored.updated_at,
        )
