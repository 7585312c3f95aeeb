from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from event_planner.models.config_store import ConfigEntry

SETTINGS_NAME = "event_planner.settings"

# Values a config object has before anyone saves it
DEFAULTS: dict[str, dict[str, Any]] = {
    SETTINGS_NAME: {
        "notify_admin": False,
        "admin_notification_email": None,
    },
}


class ConfigStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, name: str) -> dict[str, Any]:
        res = await self.db.execute(select(ConfigEntry).where(ConfigEntry.name == name))
        entry = res.scalar_one_or_none()

        data = dict(DEFAULTS.get(name, {}))
        if entry and entry.data:
            data.update(entry.data)
        return data

    async def save(self, name: str, data: dict[str, Any]) -> dict[str, Any]:
        res = await self.db.execute(select(ConfigEntry).where(ConfigEntry.name == name))
        entry = res.scalar_one_or_none()

        merged = dict(entry.data or {}) if entry else {}
        merged.update(data)

        if entry:
            # reassign so the JSON column is marked dirty
            entry.data = merged
        else:
            self.db.add(ConfigEntry(name=name, data=merged))

        await self.db.flush()
        return await self.get(name)
