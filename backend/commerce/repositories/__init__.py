"""Repositories - SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - Repositories translate rows <-> domain entities; nothing above them sees a Row class
    - find_by_id returns None on a miss (never raises for absence)
    - Unique-constraint violations surface as ConflictError, after rollback

Design Decisions:
    - One AsyncSession per repository instance, injected per request
    - save = session.merge + commit: insert-or-replace by primary key
"""
