"""Route Modules - one file per module (clients, products, catalog, payments) plus health.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to facades)
"""
