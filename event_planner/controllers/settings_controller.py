import logging

from event_planner.core.validation import ValidationResult
from event_planner.repositories.config_store import SETTINGS_NAME, ConfigStore
from event_planner.schemas.settings import SettingsIn

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "The configuration options have been saved."


async def get_notification_settings(store: ConfigStore) -> dict:
    config = await store.get(SETTINGS_NAME)
    return {
        "notify_admin": bool(config.get("notify_admin")),
        "admin_notification_email": config.get("admin_notification_email"),
    }


def validate_settings(payload: SettingsIn) -> ValidationResult:
    result = ValidationResult()
    if payload.notify_admin and not payload.admin_notification_email:
        result.add_error("admin_notification_email", "Please provide an administrator email address.")
    return result


async def save_notification_settings(store: ConfigStore, payload: SettingsIn) -> dict:
    await store.save(
        SETTINGS_NAME,
        {
            "notify_admin": bool(payload.notify_admin),
            "admin_notification_email": payload.admin_notification_email,
        },
    )
    await store.db.commit()
    logger.info(
        "Notification settings saved (notify_admin=%s, admin_notification_email=%s)",
        payload.notify_admin,
        payload.admin_notification_email,
    )

    return {**(await get_notification_settings(store)), "message": SAVED_MESSAGE}
