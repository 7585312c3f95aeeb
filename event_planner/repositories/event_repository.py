"""
Data access for events and registrations.

Every read is a single filtered/ordered select and returns plain dicts (or
option maps), never ORM instances, so callers can't lazy-load or mutate
rows behind the session's back. Absence is an empty collection or None.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from event_planner.core.config import settings
from event_planner.core.timeutil import format_timestamp
from event_planner.models.events import Event, Registration

EVENT_FIELDS = (
    "id", "event_name", "category", "registration_start",
    "registration_end", "event_date", "created",
)
REGISTRATION_FIELDS = (
    "id", "event_id", "full_name", "email", "college_name", "department",
    "category", "event_date", "event_name", "created",
)


def _event_dict(ev: Event) -> dict[str, Any]:
    out = {name: getattr(ev, name) for name in EVENT_FIELDS}
    for name in ("id", "registration_start", "registration_end", "event_date", "created"):
        out[name] = int(out[name])
    return out


def _registration_dict(reg: Registration) -> dict[str, Any]:
    out = {name: getattr(reg, name) for name in REGISTRATION_FIELDS}
    for name in ("id", "event_id", "event_date", "created"):
        out[name] = int(out[name])
    return out


class EventRepository:
    """
    now is the request time in epoch seconds. It stamps `created` and
    decides which registration windows are open, so one request sees one
    consistent clock.
    """

    def __init__(self, db: AsyncSession, now: int):
        self.db = db
        self.now = int(now)

    # ── categories ────────────────────────────────────────────────────
    def get_categories(self) -> dict[str, str]:
        return dict(settings.EVENT_CATEGORIES)

    def category_label(self, category: str) -> str:
        return settings.EVENT_CATEGORIES.get(category, category)

    def _window_open(self, stmt):
        return stmt.where(
            Event.registration_start <= self.now,
            Event.registration_end >= self.now,
        )

    # ── events ────────────────────────────────────────────────────────
    async def create_event(self, values: dict[str, Any]) -> int:
        ev = Event(
            event_name=values["event_name"],
            category=values["category"],
            registration_start=int(values["registration_start"]),
            registration_end=int(values["registration_end"]),
            event_date=int(values["event_date"]),
            created=self.now,
        )
        self.db.add(ev)
        await self.db.flush()
        return int(ev.id)

    async def get_events(self, active_only: bool = False) -> list[dict[str, Any]]:
        stmt = select(Event).order_by(Event.event_date.asc(), Event.event_name.asc())
        if active_only:
            stmt = self._window_open(stmt)

        res = await self.db.execute(stmt)
        return [_event_dict(ev) for ev in res.scalars().all()]

    async def get_event(self, event_id: int) -> dict[str, Any] | None:
        res = await self.db.execute(select(Event).where(Event.id == int(event_id)))
        ev = res.scalar_one_or_none()
        return _event_dict(ev) if ev else None

    async def get_event_dates_by_category(self, category: str, active_only: bool = True) -> dict[str, str]:
        stmt = (
            select(Event.event_date)
            .where(Event.category == category)
            .distinct()
            .order_by(Event.event_date.asc())
        )
        if active_only:
            stmt = self._window_open(stmt)

        res = await self.db.execute(stmt)
        return {str(ts): format_timestamp(ts) for ts in res.scalars().all()}

    async def get_events_by_category_and_date(
        self,
        category: str,
        event_date: int,
        active_only: bool = True,
    ) -> dict[int, str]:
        stmt = (
            select(Event.id, Event.event_name)
            .where(Event.category == category, Event.event_date == int(event_date))
            .order_by(Event.event_name.asc())
        )
        if active_only:
            stmt = self._window_open(stmt)

        rows = (await self.db.execute(stmt)).all()
        return {int(r.id): r.event_name for r in rows}

    async def get_active_categories(self) -> dict[str, str]:
        stmt = self._window_open(
            select(Event.category).group_by(Event.category).order_by(Event.category.asc())
        )
        res = await self.db.execute(stmt)

        categories = settings.EVENT_CATEGORIES
        return {c: categories[c] for c in res.scalars().all() if c in categories}

    async def get_all_event_dates(self) -> dict[str, str]:
        stmt = select(Event.event_date).distinct().order_by(Event.event_date.asc())
        res = await self.db.execute(stmt)
        return {str(ts): format_timestamp(ts) for ts in res.scalars().all()}

    async def get_events_by_date(self, event_date: int) -> dict[int, str]:
        stmt = (
            select(Event.id, Event.event_name)
            .where(Event.event_date == int(event_date))
            .order_by(Event.event_name.asc())
        )
        rows = (await self.db.execute(stmt)).all()
        return {int(r.id): r.event_name for r in rows}

    # ── registrations ─────────────────────────────────────────────────
    async def registration_exists(self, event_date: int, email: str) -> bool:
        stmt = select(func.count(Registration.id)).where(
            Registration.event_date == int(event_date),
            Registration.email == email,
        )
        return bool((await self.db.execute(stmt)).scalar())

    async def create_registration(self, values: dict[str, Any]) -> int:
        reg = Registration(
            event_id=int(values["event_id"]),
            full_name=values["full_name"],
            email=values["email"],
            college_name=values["college_name"],
            department=values["department"],
            category=values["category"],
            event_date=int(values["event_date"]),
            event_name=values["event_name"],
            created=int(values.get("created") or self.now),
        )
        self.db.add(reg)
        await self.db.flush()
        return int(reg.id)

    @staticmethod
    def _filter_registrations(stmt, filters: dict[str, Any] | None):
        filters = filters or {}
        if filters.get("event_date"):
            stmt = stmt.where(Registration.event_date == int(filters["event_date"]))
        if filters.get("event_id"):
            stmt = stmt.where(Registration.event_id == int(filters["event_id"]))
        return stmt

    async def get_registrations(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        stmt = self._filter_registrations(
            select(Registration).order_by(Registration.created.desc(), Registration.id.desc()),
            filters,
        )
        res = await self.db.execute(stmt)
        return [_registration_dict(r) for r in res.scalars().all()]

    async def count_registrations(self, filters: dict[str, Any] | None = None) -> int:
        stmt = self._filter_registrations(select(func.count(Registration.id)), filters)
        return int((await self.db.execute(stmt)).scalar() or 0)
