"""Dependencies — FastAPI providers that hand each route its handler.

Invariants:
    - Stores come from request.app.state.stores (set by create_app)
    - A handler is built per request around the long-lived store

Design Decisions:
    - Depends() over module-level handler singletons: tests swap stores by
      building a new app, no dependency_overrides needed
"""

from fastapi import Depends, Request

from typed_api.services.handle_companies import CompanyHandlers
from typed_api.services.handle_permissions import PermissionHandlers
from typed_api.services.handle_user_types import UserTypeHandlers
from typed_api.services.handle_users import UserHandlers
from typed_api.services.stores import Stores


def get_stores(request: Request) -> Stores:
    return request.app.state.stores


def get_user_handlers(stores: Stores = Depends(get_stores)) -> UserHandlers:
    return UserHandlers(stores.users)


def get_user_type_handlers(stores: Stores = Depends(get_stores)) -> UserTypeHandlers:
    return UserTypeHandlers(stores.user_types)


def get_company_handlers(stores: Stores = Depends(get_stores)) -> CompanyHandlers:
    return CompanyHandlers(stores.companies)


def get_permission_handlers(stores: Stores = Depends(get_stores)) -> PermissionHandlers:
    return PermissionHandlers(stores.permissions)
