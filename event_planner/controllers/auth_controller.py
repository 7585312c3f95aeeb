import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from event_planner.core.config import settings
from event_planner.core.security import create_access_token, verify_password
from event_planner.models.admin import Admin
from event_planner.schemas.auth import AdminInfo, LoginRequest, LoginResponse, MeResponse

logger = logging.getLogger(__name__)


async def login(payload: LoginRequest, db: AsyncSession) -> LoginResponse:
    """
    Admin login.

    The password is verified even when the email is unknown, and both
    failures share one message, so the endpoint can't be used to probe
    which emails have accounts. is_active is checked only after the
    password matched.
    """
    result = await db.execute(
        select(Admin).where(Admin.email == str(payload.email).lower())
    )
    admin = result.scalar_one_or_none()

    password_ok = verify_password(
        payload.password,
        admin.password_hash if admin else None,
    )

    if not admin or not password_ok:
        logger.info("Failed admin login for %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    if not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is deactivated. Contact support.",
        )

    admin.last_login_at = datetime.now(timezone.utc)
    db.add(admin)
    await db.commit()

    token = create_access_token(admin.id, admin.email)

    return LoginResponse(
        access_token=token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        admin=AdminInfo(
            id=admin.id,
            name=admin.name,
            email=admin.email,
        ),
    )


async def get_me(admin: Admin) -> MeResponse:
    """Admin already loaded by the dependency."""
    return MeResponse(
        id=admin.id,
        name=admin.name,
        email=admin.email,
        is_active=admin.is_active,
        last_login_at=admin.last_login_at,
        created_at=admin.created_at,
    )
