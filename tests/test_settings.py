from event_planner.controllers.settings_controller import validate_settings
from event_planner.schemas.settings import SettingsIn


async def test_defaults_before_first_save(client):
    r = await client.get("/api/admin/settings")
    assert r.status_code == 200
    assert r.json() == {
        "notify_admin": False,
        "admin_notification_email": None,
        "message": None,
    }


async def test_save_and_read_back(client):
    r = await client.put(
        "/api/admin/settings",
        json={"notify_admin": True, "admin_notification_email": "office@x.com"},
    )
    assert r.status_code == 200
    assert r.json()["message"] == "The configuration options have been saved."

    body = (await client.get("/api/admin/settings")).json()
    assert body["notify_admin"] is True
    assert body["admin_notification_email"] == "office@x.com"

    # saving again updates the same config object
    await client.put("/api/admin/settings", json={"notify_admin": False, "admin_notification_email": ""})
    body = (await client.get("/api/admin/settings")).json()
    assert body["notify_admin"] is False
    assert body["admin_notification_email"] is None


async def test_email_required_when_notifications_on(client):
    r = await client.put("/api/admin/settings", json={"notify_admin": True, "admin_notification_email": ""})
    assert r.status_code == 422
    assert r.json()["detail"]["errors"] == {
        "admin_notification_email": "Please provide an administrator email address.",
    }

    body = (await client.get("/api/admin/settings")).json()
    assert body["notify_admin"] is False


async def test_malformed_email_rejected(client):
    r = await client.put("/api/admin/settings", json={"notify_admin": True, "admin_notification_email": "office"})
    assert r.status_code == 422


def test_validate_settings_allows_email_without_toggle():
    assert validate_settings(SettingsIn(notify_admin=False, admin_notification_email="a@x.com")).ok
    assert validate_settings(SettingsIn()).ok
    assert not validate_settings(SettingsIn(notify_admin=True)).ok
