"""Payment Schemas - process-payment request and result shapes.

Invariants:
    - orderId required and non-empty; amount a finite number > 0 with at most 2 decimal places
    - PaymentResponse.status is always final (approved | declined)
"""

from datetime import datetime

from pydantic import BaseModel, Field

from commerce.core.domain_types import TransactionStatus
from commerce.schemas import CAMEL_CONFIG, Money


class ProcessPaymentInput(BaseModel):
    """POST /payments body."""
    model_config = CAMEL_CONFIG

    order_id: str = Field(strict=True, min_length=1)
    amount: Money


class PaymentResponse(BaseModel):
    """Persisted transaction projection."""
    model_config = CAMEL_CONFIG

    transaction_id: str
    order_id: str
    amount: float
    status: TransactionStatus
    created_at: datetime
    updated_at: datetime
