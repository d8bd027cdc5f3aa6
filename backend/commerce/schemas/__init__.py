"""Pydantic Schemas - request/response contracts for API endpoints.

Invariants:
    - Wire names are camelCase (alias_generator), Python attributes are snake_case
    - Request schemas use strict field types; unknown fields are ignored
    - Money inputs are rejected unless the money columns store them exactly

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
    - Use cases return the response schemas directly: one projection per view, no
      second mapping layer in the routes
"""

from typing import Annotated

from pydantic import AfterValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from commerce.core.domain_types import MONEY_LIMIT, MONEY_QUANTUM, to_decimal

CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="ignore",
)


def _check_money(value: float) -> float:
    amount = to_decimal(value)
    if amount >= MONEY_LIMIT:
        raise PydanticCustomError(
            "money_too_large", "must be less than {limit}", {"limit": str(MONEY_LIMIT)},
        )
    if amount != amount.quantize(MONEY_QUANTUM):
        raise PydanticCustomError(
            "money_precision", "must have at most 2 decimal places",
        )
    return value


# Positive JSON number, at most 2 decimal places, below MONEY_LIMIT
Money = Annotated[
    float,
    Field(strict=True, gt=0, allow_inf_nan=False),
    AfterValidator(_check_money),
]
