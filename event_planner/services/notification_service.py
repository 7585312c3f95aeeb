import logging
from typing import Any, Protocol

from event_planner.core.timeutil import format_timestamp
from event_planner.repositories.config_store import SETTINGS_NAME, ConfigStore

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    async def mail(self, key: str, to_email: str, params: dict) -> bool: ...


class EmailNotificationService:
    """Sends the registrant's confirmation and, when enabled, the admin copy."""

    def __init__(self, mailer: Mailer, config_store: ConfigStore):
        self.mailer = mailer
        self.config_store = config_store

    async def notify(self, registration: dict[str, Any], category_label: str) -> None:
        params = {
            "full_name": registration["full_name"],
            "event_name": registration["event_name"],
            "event_date": format_timestamp(registration["event_date"]),
            "category": category_label,
            "email": registration["email"],
            "college_name": registration["college_name"],
            "department": registration["department"],
        }

        await self.mailer.mail("user_confirmation", registration["email"], params)

        config = await self.config_store.get(SETTINGS_NAME)
        admin_email = config.get("admin_notification_email")
        if config.get("notify_admin") and admin_email:
            await self.mailer.mail("admin_notification", admin_email, params)
        else:
            logger.debug("Admin notification disabled, skipped for %s", registration["email"])
