"""Client Entity - an administered customer record.

Invariants:
    - name and address are non-empty strings
    - email is syntactically valid (no deliverability check, no DNS)
    - email uniqueness is NOT checked here: the storage unique index owns it

Design Decisions:
    - email-validator over a hand-written regex: same checker the request schema uses
      at the API boundary, so domain and transport agree on what "valid" means
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from commerce.core.entity import Entity, require_text
from commerce.core.errors import DomainInvariantError


@dataclass(frozen=True, kw_only=True)
class Client(Entity):
    """Client record. Immutable after construction."""
    name: str
    email: str
    address: str

    def __post_init__(self) -> None:
        super().__post_init__()
        require_text(self.name, "name", "Name")
        require_text(self.address, "address", "Address")
        _check_email(self.email)


def _check_email(email: object) -> None:
    if not isinstance(email, str):
        raise DomainInvariantError("Email must be a string", "email")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise DomainInvariantError(f"Email is invalid: {e}", "email")
