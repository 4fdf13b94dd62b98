"""Services Layer — store container and per-resource handlers.

Invariants:
    - Handlers receive their stores by injection (never module-level state)
    - Handlers raise ResourceNotFoundError; they never build HTTP responses

Design Decisions:
    - One handler file per resource for locality (ADR: no god objects)
    - Shared list/get/update/delete lives in handle_records.RecordHandlers
"""
