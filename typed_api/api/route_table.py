"""Route Table — the (method, path) pairs bound on an application.

Invariants:
    - Each (method, path) pair is bound at most once; a duplicate is a
      configuration error raised before the app serves traffic
    - HEAD is ignored (Starlette adds it implicitly next to GET)
    - Routes of included routers are listed with their full path, whether
      include_router copied them to the top level or kept the router nested

Design Decisions:
    - FastAPI silently keeps the first match on duplicates, so the check runs
      in create_app instead of relying on dispatch order
    - Nested entries are found by attribute (original_router, routes) rather
      than by class, since the included-router type is private to FastAPI
"""

from collections import Counter
from typing import Iterable, Iterator

from fastapi import FastAPI
from starlette.routing import BaseRoute, Mount

from typed_api.core.errors import RouteConflictError


def _walk(routes: Iterable[BaseRoute], prefix: str = "") -> Iterator[tuple[str, str]]:
    for route in routes:
        nested = getattr(route, "original_router", None)
        if nested is not None:
            include_prefix = getattr(route, "prefix", "") or ""
            yield from _walk(nested.routes, prefix + include_prefix)
            continue
        if isinstance(route, Mount):
            yield from _walk(route.routes, prefix + route.path)
            continue
        methods = getattr(route, "methods", None)
        if not methods:
            continue
        for method in sorted(methods):
            if method != "HEAD":
                yield method, prefix + route.path


def route_table(app: FastAPI) -> list[tuple[str, str]]:
    """List every (method, path) pair in registration order."""
    return list(_walk(app.router.routes))


def ensure_unique_routes(app: FastAPI) -> None:
    """Raise RouteConflictError if any (method, path) pair is bound twice."""
    counts = Counter(route_table(app))
    duplicates = [pair for pair, count in counts.items() if count > 1]
    if duplicates:
        raise RouteConflictError(duplicates)
