"""Domain Types — id generation, record defaults and the permission seed."""

from uuid import UUID

from typed_api.core.domain_types import (
    DEFAULT_PERMISSIONS, Company, User, UserType, new_record_id,
)


def test_record_ids_are_uuid_strings():
    rid = new_record_id()
    assert isinstance(rid, str)
    assert str(UUID(rid)) == rid


def test_record_ids_are_distinct():
    ids = {new_record_id() for _ in range(500)}
    assert len(ids) == 500


def test_user_defaults():
    user = User(id=new_record_id(), name="Ana", email="ana@x.com", user_type="admin")
    assert user.company_id is None
    assert user.permissions == []


def test_defaults_are_not_shared_between_records():
    a = UserType(id=new_record_id(), type="admin")
    b = UserType(id=new_record_id(), type="guest")
    a.permissions.append("read")
    assert b.permissions == []


def test_company_starts_with_empty_embedded_lists():
    company = Company(id=new_record_id(), name="Acme", cnpj="12.345.678/0001-90")
    assert company.users == []
    assert company.user_groups == []


def test_default_permissions_order():
    assert [name for name, _ in DEFAULT_PERMISSIONS] == ["read", "write", "delete"]
