"""Infrastructure Layer - database engine, logging, sample data.

Invariants:
    - Infrastructure never imports from services/ or api/

Design Decisions:
    - Lifecycle owned by the FastAPI lifespan (no import-time side effects)
"""
