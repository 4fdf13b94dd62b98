"""User Types, Companies and Permissions API — CRUD over HTTP."""

import pytest


async def _first_id(client, path):
    return (await client.get(path)).json()[-1]["id"]


# --- permissions --------------------------------------------------------------

async def test_permissions_seeded_at_start(client):
    res = await client.get("/permissions")
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["read", "write", "delete"]


async def test_permission_crud(client):
    res = await client.post("/permissions", json={"name": "export", "description": "Export"})
    assert res.status_code == 201
    permission_id = await _first_id(client, "/permissions")

    res = await client.put(f"/permissions/{permission_id}", json={"description": "Export data"})
    assert res.status_code == 200
    assert (await client.get(f"/permissions/{permission_id}")).json() == {
        "id": permission_id, "name": "export", "description": "Export data",
    }

    assert (await client.delete(f"/permissions/{permission_id}")).status_code == 200
    assert len((await client.get("/permissions")).json()) == 3


# --- user types ---------------------------------------------------------------

async def test_user_type_crud_and_assign(client):
    assert (await client.post("/userTypes", json={"type": "admin"})).status_code == 201
    type_id = await _first_id(client, "/userTypes")
    assert (await client.get(f"/userTypes/{type_id}")).json() == {
        "id": type_id, "type": "admin", "permissions": [],
    }

    res = await client.put(f"/userTypes/{type_id}/permissions", json={"permissions": ["read"]})
    assert res.status_code == 200
    await client.put(f"/userTypes/{type_id}", json={"type": ""})
    assert (await client.get(f"/userTypes/{type_id}")).json() == {
        "id": type_id, "type": "admin", "permissions": ["read"],
    }

    assert (await client.delete(f"/userTypes/{type_id}")).status_code == 200
    assert (await client.get("/userTypes")).json() == []


# --- companies ----------------------------------------------------------------

async def test_company_crud(client):
    res = await client.post("/companies", json={"name": "Acme", "cnpj": "12.345.678/0001-90"})
    assert res.status_code == 201
    company_id = await _first_id(client, "/companies")
    assert (await client.get(f"/companies/{company_id}")).json() == {
        "id": company_id, "name": "Acme", "cnpj": "12.345.678/0001-90",
        "users": [], "userGroups": [],
    }

    await client.put(f"/companies/{company_id}", json={"name": "Acme SA"})
    assert (await client.get(f"/companies/{company_id}")).json()["name"] == "Acme SA"

    assert (await client.delete(f"/companies/{company_id}")).status_code == 200
    assert (await client.get(f"/companies/{company_id}")).status_code == 404


async def test_company_users_never_populated(client, create_user):
    await client.post("/companies", json={"name": "Acme", "cnpj": "1"})
    company_id = await _first_id(client, "/companies")
    await create_user(companyId=company_id)
    company = (await client.get(f"/companies/{company_id}")).json()
    assert company["users"] == []
    assert len((await client.get(f"/users/company/{company_id}")).json()) == 1


async def test_company_create_missing_cnpj_is_400(client):
    assert (await client.post("/companies", json={"name": "Acme"})).status_code == 400
    assert (await client.get("/companies")).json() == []


# --- not found ----------------------------------------------------------------

@pytest.mark.parametrize("resource", ["userTypes", "companies", "permissions"])
async def test_unknown_id_is_404(client, resource):
    before = (await client.get(f"/{resource}")).json()
    assert (await client.get(f"/{resource}/nope")).status_code == 404
    assert (await client.put(f"/{resource}/nope", json={})).status_code == 404
    res = await client.delete(f"/{resource}/nope")
    assert res.status_code == 404
    assert res.content == b""
    assert (await client.get(f"/{resource}")).json() == before


async def test_user_type_assign_unknown_id_is_404(client):
    res = await client.put("/userTypes/nope/permissions", json={"permissions": []})
    assert res.status_code == 404


async def test_user_type_validation_envelope_names_resource(client):
    res = await client.put("/userTypes/any/permissions", json={"permissions": "read"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["resource"] == "UserType"
    assert error["path"] == "/userTypes/any/permissions"
    assert error["details"][0]["field"] == "permissions"
