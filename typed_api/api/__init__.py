"""API Layer — FastAPI routes, dependencies, error handlers and docs.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - Routes hold no business logic; they call handlers from services/

Design Decisions:
    - Thin routes delegate to handlers (ADR: functional core, HTTP shell)
"""
