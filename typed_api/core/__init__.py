"""Core Layer — domain records, stores and update rules. No IO, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Store operations are synchronous and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell (ADR: thin routes, testable core)
"""
