"""ORM Models - SQLAlchemy declarative models, one per table.

Invariants:
    - All models inherit from Base (db/base.py)
    - Row classes are persistence shapes; domain entities live in core/

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from commerce.models.client import ClientRow  # noqa: F401
from commerce.models.product import ProductRow  # noqa: F401
from commerce.models.transaction import TransactionRow  # noqa: F401
