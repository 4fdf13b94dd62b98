"""OpenAPI Docs — builds the API description from the registered route schemas.

Invariants:
    - build_openapi_schema is pure: same routes + settings → same document
    - Reads only route metadata (description, tags, responses, Pydantic models);
      never touches stores or handlers
    - The document is built once per app and cached on app.openapi_schema

Design Decisions:
    - Reuses fastapi.openapi.utils.get_openapi: the same generator that backs
      /openapi.json and the Swagger UI at /docs
"""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from typed_api.config import Settings

TAGS_METADATA: list[dict[str, str]] = [
    {"name": "Users", "description": "Users with their type label, company label and permissions."},
    {"name": "User Types", "description": "User types and the permissions they carry."},
    {"name": "Companies", "description": "Companies identified by CNPJ."},
    {"name": "Permissions", "description": "Permission catalogue, seeded with read, write, delete."},
]


def build_openapi_schema(app: FastAPI, settings: Settings) -> dict[str, Any]:
    """Derive the OpenAPI document from the app's route table."""
    return get_openapi(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        routes=app.routes,
        tags=TAGS_METADATA,
    )


def install_openapi(app: FastAPI, settings: Settings) -> None:
    """Make the app serve build_openapi_schema at /openapi.json (cached)."""

    def openapi() -> dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi_schema(app, settings)
        return app.openapi_schema

    app.openapi = openapi
