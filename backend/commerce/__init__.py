"""Commerce Application Package - client, product, catalog and payment modules.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
