from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from event_planner.core.database import get_db
from event_planner.core.email_service import BrevoMailer, get_mailer
from event_planner.core.security import decode_access_token
from event_planner.core.timeutil import now_timestamp
from event_planner.models.admin import Admin
from event_planner.repositories.config_store import ConfigStore
from event_planner.repositories.event_repository import EventRepository
from event_planner.services.notification_service import EmailNotificationService

bearer = HTTPBearer(auto_error=False)


def _not_authenticated_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing token",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> Admin:
    not_authenticated = _not_authenticated_exception()

    if not credentials:
        raise not_authenticated

    try:
        payload = decode_access_token(credentials.credentials)
        admin_id = int(payload["sub"])

        if payload.get("type") != "access":
            raise not_authenticated

    except (JWTError, KeyError, ValueError):
        raise not_authenticated

    result = await db.execute(select(Admin).where(Admin.id == admin_id))
    admin = result.scalar_one_or_none()

    if admin is None:
        raise not_authenticated

    if not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This admin account has been deactivated",
        )

    return admin


# ── Request-scoped services ───────────────────────────────────────────

def get_request_time() -> int:
    """Epoch seconds, taken once per request."""
    return now_timestamp()


def get_event_repository(
    db: AsyncSession = Depends(get_db),
    now: int = Depends(get_request_time),
) -> EventRepository:
    return EventRepository(db, now)


def get_config_store(db: AsyncSession = Depends(get_db)) -> ConfigStore:
    return ConfigStore(db)


def get_notification_service(
    mailer: BrevoMailer = Depends(get_mailer),
    config_store: ConfigStore = Depends(get_config_store),
) -> EmailNotificationService:
    return EmailNotificationService(mailer, config_store)
