"""Service test fixtures — fresh stores and handlers, no HTTP."""

import pytest

from typed_api.services.handle_companies import CompanyHandlers
from typed_api.services.handle_permissions import PermissionHandlers
from typed_api.services.handle_user_types import UserTypeHandlers
from typed_api.services.handle_users import UserHandlers
from typed_api.services.stores import build_stores


@pytest.fixture
def stores():
    return build_stores()


@pytest.fixture
def users(stores):
    return UserHandlers(stores.users)


@pytest.fixture
def user_types(stores):
    return UserTypeHandlers(stores.user_types)


@pytest.fixture
def companies(stores):
    return CompanyHandlers(stores.companies)


@pytest.fixture
def permissions(stores):
    return PermissionHandlers(stores.permissions)
