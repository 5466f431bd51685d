from __future__ import annotations

from sqlalchemy import select

from directory_api.infrastructure.database.models.role_model import RoleModel


def test_create_role_defaults(client):
    resp = client.post("/roles", json={"name": "admin"})
    assert resp.status_code == 201

    body = resp.get_json()
    assert body["success"] is True
    assert body["message"] == "Role created successfully"
    role = body["data"]
    assert role["name"] == "admin"
    assert role["description"] == ""
    assert role["isDeleted"] is False
    assert role["createdAt"].endswith("Z")
    assert len(role["id"]) == 32


def test_duplicate_role_name_conflicts_and_first_survives(client, make_role):
    first = make_role("editor", "can edit")

    resp = client.post("/roles", json={"name": "editor"})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Role name already exists"}

    again = client.get(f"/roles/{first['id']}")
    assert again.status_code == 200
    assert again.get_json()["data"]["description"] == "can edit"


def test_role_name_is_required(client):
    assert client.post("/roles", json={}).status_code == 400
    resp = client.post("/roles", json={"name": "   "})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_list_roles_newest_first_with_count(client, make_role):
    make_role("a")
    make_role("b")
    make_role("c")

    body = client.get("/roles").get_json()
    assert body["count"] == 3
    created = [r["createdAt"] for r in body["data"]]
    assert created == sorted(created, reverse=True)


def test_soft_deleted_role_is_hidden_but_kept(client, make_role, database):
    role = make_role("temp")

    resp = client.delete(f"/roles/{role['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["isDeleted"] is True

    assert client.get(f"/roles/{role['id']}").status_code == 404
    assert client.get("/roles").get_json()["count"] == 0

    with database.session() as session:
        stored = session.execute(select(RoleModel).where(RoleModel.id == role["id"])).scalar_one_or_none()
        assert stored is not None
        assert stored.is_deleted is True


def test_delete_role_twice_is_not_found(client, make_role):
    role = make_role("once")
    assert client.delete(f"/roles/{role['id']}").status_code == 200

    resp = client.delete(f"/roles/{role['id']}")
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Role not found"


def test_deleted_role_name_can_be_reused(client, make_role):
    role = make_role("seasonal")
    client.delete(f"/roles/{role['id']}")

    resp = client.post("/roles", json={"name": "seasonal"})
    assert resp.status_code == 201
    assert resp.get_json()["data"]["id"] != role["id"]


def test_update_role_patches_fields(client, make_role):
    role = make_role("viewer", "read only")

    resp = client.put(f"/roles/{role['id']}", json={"name": "reader"})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["name"] == "reader"
    assert data["description"] == "read only"
    assert data["updatedAt"] is not None

    resp = client.put(f"/roles/{role['id']}", json={"description": "reads"})
    assert resp.get_json()["data"]["name"] == "reader"
    assert resp.get_json()["data"]["description"] == "reads"


def test_update_role_name_collision(client, make_role):
    make_role("alpha")
    beta = make_role("beta")

    resp = client.put(f"/roles/{beta['id']}", json={"name": "alpha"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Role name already exists"

    # renaming to its own name is not a conflict
    assert client.put(f"/roles/{beta['id']}", json={"name": "beta"}).status_code == 200


def test_update_missing_or_deleted_role(client, make_role):
    assert client.put("/roles/does-not-exist", json={"name": "x"}).status_code == 404

    role = make_role("gone")
    client.delete(f"/roles/{role['id']}")
    assert client.put(f"/roles/{role['id']}", json={"name": "back"}).status_code == 404


def test_update_role_rejects_null_name(client, make_role):
    role = make_role("strict")
    assert client.put(f"/roles/{role['id']}", json={"name": None}).status_code == 400
