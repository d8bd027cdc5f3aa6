"""Client Schemas - client administration request and response shapes.

Invariants:
    - name, email, address required; id optional (generated when absent)
    - email shape checked by email-validator; the submitted string is kept verbatim
      (no case folding or IDNA normalization), so a read returns exactly what was sent
"""

from datetime import datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field
from pydantic_core import PydanticCustomError

from commerce.schemas import CAMEL_CONFIG


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise PydanticCustomError(
            "email_invalid", "value is not a valid email address: {reason}",
            {"reason": str(e)},
        )
    return value


Email = Annotated[str, Field(strict=True), AfterValidator(_check_email)]


class AddClientInput(BaseModel):
    """POST /clients body."""
    model_config = CAMEL_CONFIG

    id: str | None = Field(None, strict=True, min_length=1)
    name: str = Field(strict=True, min_length=1)
    email: Email
    address: str = Field(strict=True, min_length=1)


class ClientResponse(BaseModel):
    """GET /clients/{id} projection."""
    model_config = CAMEL_CONFIG

    id: str
    name: str
    email: str
    address: str
    created_at: datetime
    updated_at: datetime
