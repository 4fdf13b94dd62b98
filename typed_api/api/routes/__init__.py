"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/ handlers)
    - Mutations answer with an empty body; only list/get return payloads

Design Decisions:
    - Explicit registration in main.create_app over auto-discovery
"""
