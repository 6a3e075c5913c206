"""HTTP-level tests for the listing and the user pages."""

import pytest

from core import queries
from core.core_models import Address, User
from users_ui.forms import NAME_ERROR

pytestmark = pytest.mark.django_db


# -------------------------
# Listing
# -------------------------
def test_home_lists_first_page(client, make_user):
    for i in range(7):
        make_user(name=f"User {i}", age_minutes=i)

    resp = client.get("/")

    assert resp.status_code == 200
    assert [u["name"] for u in resp.context["users"]] == ["User 0", "User 1", "User 2"]
    assert resp.context["currentPage"] == 1
    assert resp.context["totalPages"] == 3
    assert b"User 0" in resp.content


def test_home_page_and_limit_params(client, make_user):
    for i in range(7):
        make_user(name=f"User {i}", age_minutes=i)

    resp = client.get("/", {"page": "2", "limit": "5"})

    assert [u["name"] for u in resp.context["users"]] == ["User 5", "User 6"]
    assert resp.context["totalPages"] == 2


@pytest.mark.parametrize("page", ["abc", "0", "-1", ""])
def test_home_invalid_page_defaults_to_first(client, make_user, page):
    make_user()

    resp = client.get("/", {"page": page})

    assert resp.status_code == 200
    assert resp.context["currentPage"] == 1
    assert len(resp.context["users"]) == 1


def test_home_filters(client, make_user):
    make_user(name="john smith", newsletter=True)
    make_user(name="mary smith", newsletter=False)
    make_user(name="Bob Jones", newsletter=True)

    by_flag = client.get("/", {"newsletter": "true", "limit": "10"})
    by_name = client.get("/", {"q": "smith", "limit": "10"})

    assert {u["name"] for u in by_flag.context["users"]} == {"john smith", "Bob Jones"}
    assert all("smith" in u["name"].lower() for u in by_name.context["users"])
    assert len(by_name.context["users"]) == 2
    assert by_name.context["q"] == "smith"
    assert by_flag.context["newsletter"] == "true"


def test_home_storage_error_renders_empty_list(client, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("database is gone")

    monkeypatch.setattr(queries, "list_users", boom)

    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.context["users"] == []
    assert resp.context["error"] == "Error loading users"
    assert b"database is gone" not in resp.content


# -------------------------
# Create
# -------------------------
def test_create_form_renders(client):
    resp = client.get("/users/create")

    assert resp.status_code == 200
    assert "users_templates/adduser.html" in [t.name for t in resp.templates]


def test_create_rejects_short_name(client):
    resp = client.post("/users/create", {"name": "A", "occupation": " Chef ", "newsletter": "on"})

    assert resp.status_code == 200
    assert resp.context["error"] == NAME_ERROR
    assert resp.context["formData"] == {"name": "A", "occupation": " Chef ", "newsletter": "on"}
    assert User.objects.count() == 0


def test_create_trims_and_defaults(client):
    resp = client.post("/users/create", {"name": "  Bob  "})

    assert resp.status_code == 302
    assert resp.url == "/"
    user = User.objects.get()
    assert user.name == "Bob"
    assert user.occupation is None
    assert user.newsletter is False


def test_create_with_newsletter_checked(client):
    client.post("/users/create", {"name": "Ana", "occupation": " Nurse ", "newsletter": "on"})

    user = User.objects.get()
    assert user.occupation == "Nurse"
    assert user.newsletter is True


def test_create_storage_error_echoes_detail(client, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(queries, "create_user", boom)

    resp = client.post("/users/create", {"name": "Bob"})

    assert resp.status_code == 200
    assert resp.context["error"] == "Error creating user: disk full"
    assert resp.context["formData"]["name"] == "Bob"


# -------------------------
# Detail / edit
# -------------------------
def test_detail_shows_user_and_addresses(client, make_user, make_address):
    user = make_user(name="Carla")
    make_address(user, street="Ocean Avenue")

    resp = client.get(f"/users/{user.id}")

    assert resp.status_code == 200
    assert resp.context["user"] == user
    assert b"Ocean Avenue" in resp.content


def test_detail_not_found(client):
    resp = client.get("/users/4242")

    assert resp.status_code == 200
    assert resp.context["error"] == "User not found"


def test_detail_bad_id_is_an_error(client):
    resp = client.get("/users/not-a-number")

    assert resp.status_code == 200
    assert resp.context["error"] == "Error loading user"


def test_edit_orders_addresses_newest_first(client, make_user, make_address):
    user = make_user()
    older = make_address(user, street="Older Street", age_minutes=60)
    newer = make_address(user, street="Newer Street", age_minutes=1)

    resp = client.get(f"/users/edit/{user.id}")

    assert resp.status_code == 200
    assert [a.id for a in resp.context["user"].addresses.all()] == [newer.id, older.id]


@pytest.mark.parametrize("user_id", ["4242", "abc"])
def test_edit_missing_user_redirects_home(client, user_id):
    resp = client.get(f"/users/edit/{user_id}")

    assert resp.status_code == 302
    assert resp.url == "/"


# -------------------------
# Update
# -------------------------
def test_update_empty_name_redirects_to_edit(client, make_user):
    user = make_user(name="Keep me")

    resp = client.post("/users/update", {"id": str(user.id), "name": ""})

    assert resp.status_code == 302
    assert resp.url == f"/users/edit/{user.id}"
    user.refresh_from_db()
    assert user.name == "Keep me"


def test_update_empty_name_for_id_5(client):
    resp = client.post("/users/update", {"id": "5", "name": ""})

    assert resp.url == "/users/edit/5"


def test_update_changes_row(client, make_user):
    user = make_user(name="Old", occupation="Chef", newsletter=True)

    resp = client.post("/users/update", {"id": str(user.id), "name": " New ", "occupation": ""})

    assert resp.url == "/"
    user.refresh_from_db()
    assert user.name == "New"
    assert user.occupation is None
    assert user.newsletter is False


def test_update_unknown_user_still_redirects_home(client):
    resp = client.post("/users/update", {"id": "999", "name": "Nobody"})

    assert resp.url == "/"
    assert User.objects.count() == 0


def test_update_storage_error_redirects_to_edit(client):
    resp = client.post("/users/update", {"id": "abc", "name": "Valid"})

    assert resp.url == "/users/edit/abc"


# -------------------------
# Delete
# -------------------------
@pytest.mark.parametrize("n_addresses", [0, 1, 3])
def test_delete_removes_user_and_addresses(client, make_user, make_address, n_addresses):
    user = make_user()
    for i in range(n_addresses):
        make_address(user, street=f"Street number {i}")

    resp = client.post(f"/users/delete/{user.id}")

    assert resp.url == "/"
    assert not User.objects.filter(pk=user.id).exists()
    assert Address.objects.filter(user_id=user.id).count() == 0


@pytest.mark.parametrize("user_id", ["4242", "abc"])
def test_delete_missing_user_redirects_home(client, user_id):
    resp = client.post(f"/users/delete/{user_id}")

    assert resp.status_code == 302
    assert resp.url == "/"


def test_delete_requires_post(client, make_user):
    user = make_user()

    resp = client.get(f"/users/delete/{user.id}")

    assert resp.status_code == 404
    assert User.objects.filter(pk=user.id).exists()


# -------------------------
# 404
# -------------------------
@pytest.mark.parametrize("path", ["/nope", "/users/create/extra", "/address/create"])
def test_unknown_route_renders_home_with_404(client, path):
    resp = client.get(path)

    assert resp.status_code == 404
    assert resp.context["users"] == []
    assert resp.context["error"] == "Page not found"


@pytest.mark.parametrize("path", ["/users/update", "/users/edit/"])
def test_get_on_fixed_user_paths_falls_back_to_detail(client, path):
    resp = client.get(path)

    assert resp.status_code == 200
    assert "users_templates/userview.html" in [t.name for t in resp.templates]
    assert resp.context["error"] in ("User not found", "Error loading user")
    assert "user" not in resp.context


def test_post_on_empty_edit_path_is_404(client):
    resp = client.post("/users/edit/")

    assert resp.status_code == 404
