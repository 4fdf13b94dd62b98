"""Typed API Package — CRUD service for users, user types, companies and permissions.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Version lives here so config and packaging read a single value
"""

__version__ = "0.1.0"
