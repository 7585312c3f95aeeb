import pytest

from event_planner.core.dependencies import get_current_admin
from event_planner.core.security import hash_password
from event_planner.main import app
from event_planner.models.admin import Admin


@pytest.fixture
async def admin(db):
    app.dependency_overrides.pop(get_current_admin, None)
    account = Admin(name="Event Admin", email="admin@example.org", password_hash=hash_password("s3cret-pass"))
    db.add(account)
    await db.commit()
    return account


async def test_login_and_use_token(client, admin):
    r = await client.post("/api/auth/login", json={"email": "admin@example.org", "password": "s3cret-pass"})
    assert r.status_code == 200, r.text
    token = r.json()["access_token"]
    assert r.json()["admin"]["email"] == "admin@example.org"

    headers = {"Authorization": f"Bearer {token}"}
    me = await client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["name"] == "Event Admin"

    settings = await client.get("/api/admin/settings", headers=headers)
    assert settings.status_code == 200


async def test_wrong_password_and_unknown_email_look_the_same(client, admin):
    wrong = await client.post("/api/auth/login", json={"email": "admin@example.org", "password": "nope"})
    unknown = await client.post("/api/auth/login", json={"email": "who@example.org", "password": "nope"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"detail": "Invalid email or password"}


async def test_deactivated_admin_is_forbidden(client, admin, db):
    admin.is_active = False
    await db.commit()

    r = await client.post("/api/auth/login", json={"email": "admin@example.org", "password": "s3cret-pass"})
    assert r.status_code == 403


async def test_garbage_token_is_rejected(client, admin):
    r = await client.get("/api/admin/registrations", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


async def test_public_registration_needs_no_token(client, admin):
    r = await client.get("/api/registration/form")
    assert r.status_code == 200
