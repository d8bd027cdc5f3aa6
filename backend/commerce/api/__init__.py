"""API Layer - FastAPI routes, error handlers, per-request factories.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes: validate, call one facade method, shape the status code
"""
