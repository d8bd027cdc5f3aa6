"""Core Layer - pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - Entities enforce their own invariants at construction time

Design Decisions:
    - Functional core separated from imperative shell: use cases await repositories
      around pure entity transitions
"""
