from __future__ import annotations

import pytest


@pytest.fixture()
def role_id(make_role):
    return make_role()["id"]


def _usernames(resp) -> set[str]:
    return {u["username"] for u in resp.get_json()["data"]}


def test_search_matches_username_or_full_name(client, role_id, make_user):
    make_user("alice123", role_id, fullName="Alice Smith")
    make_user("nat", role_id, fullName="Natalia")
    make_user("bob", role_id, fullName="Robert")

    resp = client.get("/users?search=ALI")
    assert resp.status_code == 200
    assert _usernames(resp) == {"alice123", "nat"}


def test_search_overrides_field_filters(client, role_id, make_user):
    make_user("alice123", role_id, fullName="Alice")
    make_user("bob", role_id, fullName="Robert")

    resp = client.get("/users?search=bob&username=alice&fullName=Alice")
    assert _usernames(resp) == {"bob"}


def test_username_and_full_name_filters_combine(client, role_id, make_user):
    make_user("anna", role_id, fullName="Anna Karenina")
    make_user("annabel", role_id, fullName="Annabel Lee")
    make_user("zoe", role_id, fullName="Anna Z")

    assert _usernames(client.get("/users?username=ANN")) == {"anna", "annabel"}
    assert _usernames(client.get("/users?fullName=anna")) == {"anna", "annabel", "zoe"}
    assert _usernames(client.get("/users?username=ann&fullName=lee")) == {"annabel"}


def test_blank_filters_are_ignored(client, role_id, make_user):
    make_user("one", role_id)
    make_user("two", role_id)

    assert _usernames(client.get("/users?search=&username=%20")) == {"one", "two"}


def test_filter_is_literal_not_a_pattern(client, role_id, make_user):
    make_user("under_score", role_id)
    make_user("underXscore", role_id)
    make_user("percent", role_id, fullName="100% real")

    assert _usernames(client.get("/users?search=under_")) == {"under_score"}
    assert _usernames(client.get("/users?search=0%25")) == {"percent"}


def test_pagination_over_25_users(client, role_id, make_user):
    for i in range(25):
        make_user(f"user{i:02d}", role_id)

    first = client.get("/users?limit=10&page=1").get_json()
    assert len(first["data"]) == 10
    assert first["pagination"] == {
        "currentPage": 1,
        "totalPages": 3,
        "totalUsers": 25,
        "limit": 10,
        "hasNext": True,
        "hasPrev": False,
    }

    last = client.get("/users?limit=10&page=3").get_json()
    assert len(last["data"]) == 5
    assert last["pagination"]["hasNext"] is False
    assert last["pagination"]["hasPrev"] is True

    seen = set()
    for page in (1, 2, 3):
        seen |= _usernames(client.get(f"/users?limit=10&page={page}"))
    assert len(seen) == 25


def test_default_page_size_and_ordering(client, role_id, make_user):
    for i in range(12):
        make_user(f"u{i}", role_id)

    body = client.get("/users").get_json()
    assert len(body["data"]) == 10
    assert body["pagination"]["limit"] == 10
    created = [u["createdAt"] for u in body["data"]]
    assert created == sorted(created, reverse=True)


def test_page_past_the_end_is_empty(client, role_id, make_user):
    make_user("solo", role_id)

    body = client.get("/users?page=5").get_json()
    assert body["data"] == []
    assert body["pagination"]["totalPages"] == 1
    assert body["pagination"]["hasNext"] is False
    assert body["pagination"]["hasPrev"] is True


def test_empty_collection(client):
    body = client.get("/users").get_json()
    assert body["data"] == []
    assert body["pagination"]["totalPages"] == 0
    assert body["pagination"]["hasNext"] is False


@pytest.mark.parametrize(
    "query",
    ["page=0", "page=-1", "limit=0", "limit=-5", "page=abc", "limit=1.5", f"page={10**19}"],
)
def test_invalid_paging_is_rejected(client, query):
    resp = client.get(f"/users?{query}")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_limit_is_clamped(client, role_id, make_user):
    make_user("clamped", role_id)

    body = client.get("/users?limit=1000").get_json()
    assert body["pagination"]["limit"] == 50


def test_listed_users_carry_their_role(client, make_role, make_user):
    role = make_role("staff")
    make_user("populated", role["id"])

    user = client.get("/users").get_json()["data"][0]
    assert user["role"]["name"] == "staff"
