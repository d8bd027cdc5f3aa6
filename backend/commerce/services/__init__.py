"""Services Layer - use cases (one operation each) and per-module facades.

Invariants:
    - Use cases depend on repository Protocols, never on SQLAlchemy
    - Facades only delegate; they add no logic and swallow no errors

Design Decisions:
    - One use case file per module for locality
"""
