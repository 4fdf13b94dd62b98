"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (path params, bodies, responses)
    - Wire names are camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from core records: schemas are API contracts, records are in-memory
      state (ADR: DDD boundary)
    - One module per resource for locality
"""
