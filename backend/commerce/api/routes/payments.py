"""Payment Routes - process a payment and report the decision.

Invariants:
    - approved -> 200, declined -> 422; the body is the persisted transaction either way
    - Invalid payloads (missing, non-numeric, amount <= 0) -> 400 and nothing is persisted
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from commerce.api.dependencies import payment_facade
from commerce.core.domain_types import TransactionStatus
from commerce.core.validation import validate_payload
from commerce.schemas.payment import PaymentResponse, ProcessPaymentInput
from commerce.services.facades import PaymentFacade

router = APIRouter(prefix="/payments", tags=["payments"])

DECLINED_STATUS_CODE = 422


@router.post(
    "",
    response_model=PaymentResponse,
    responses={
        DECLINED_STATUS_CODE: {
            "model": PaymentResponse, "description": "Payment declined",
        },
    },
)
async def process_payment(
    response: Response,
    payload: dict[str, Any] = Body(...),
    facade: PaymentFacade = Depends(payment_facade),
):
    data = validate_payload(ProcessPaymentInput, payload)
    result = await facade.process(data)
    response.status_code = (
        status.HTTP_200_OK
        if result.status == TransactionStatus.APPROVED
        else DECLINED_STATUS_CODE
    )
    return result
