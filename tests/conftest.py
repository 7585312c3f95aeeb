import os

# must be set before event_planner.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["SITE_TIMEZONE"] = "UTC"
os.environ["SENDINBLUE_API_KEY"] = ""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from event_planner.core.database import Base, get_db
from event_planner.core.dependencies import get_current_admin, get_request_time
from event_planner.core.email_service import get_mailer
from event_planner.main import app
from event_planner.models.admin import Admin
from event_planner.repositories.event_repository import EventRepository

DAY = 86400
# 00:00:00 UTC, used as "day 0" throughout the suite
DAY0 = 1_799_971_200


def ts_date(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d")


def iso(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).replace(tzinfo=None).isoformat()


class Clock:
    def __init__(self, now: int):
        self.now = now


class RecordingMailer:
    def __init__(self):
        self.sent = []

    async def mail(self, key, to_email, params):
        self.sent.append({"key": key, "to": to_email, "params": dict(params)})
        return True

    def keys(self):
        return [m["key"] for m in self.sent]


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock():
    # one hour into day 0
    return Clock(DAY0 + 3600)


@pytest.fixture
def repo(db, clock):
    return EventRepository(db, clock.now)


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
async def client(session_factory, clock, mailer):
    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_request_time] = lambda: clock.now
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_current_admin] = lambda: Admin(
        id=1, name="Test Admin", email="admin@example.org", is_active=True,
    )

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


async def add_event(
    db,
    name="AI Workshop",
    category="online_workshop",
    start=DAY0,
    end=DAY0 + 7 * DAY,
    event_date=DAY0 + 3 * DAY,
    created=DAY0,
) -> int:
    event_id = await EventRepository(db, created).create_event(
        {
            "event_name": name,
            "category": category,
            "registration_start": start,
            "registration_end": end,
            "event_date": event_date,
        }
    )
    await db.commit()
    return event_id


async def add_registration(db, event_id, email="jane@x.com", created=DAY0 + 3600, **overrides) -> int:
    repo = EventRepository(db, created)
    event = await repo.get_event(event_id)
    values = {
        "event_id": event_id,
        "full_name": "Jane Doe",
        "email": email,
        "college_name": "MIT",
        "department": "CS",
        "category": event["category"],
        "event_date": event["event_date"],
        "event_name": event["event_name"],
    }
    values.update(overrides)
    registration_id = await repo.create_registration(values)
    await db.commit()
    return registration_id
