from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from event_planner.controllers.auth_controller import get_me, login
from event_planner.core.database import get_db
from event_planner.core.dependencies import get_current_admin
from event_planner.models.admin import Admin
from event_planner.schemas.auth import LoginRequest, LoginResponse, MeResponse

router = APIRouter(prefix="/auth", tags=["Admin Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Admin Login",
    description="""
Authenticate with email + password.
Returns a JWT Bearer token for the /admin endpoints.

Add to request headers: `Authorization: Bearer <your_token>`
    """,
)
async def admin_login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    return await login(payload, db)


@router.get(
    "/me",
    response_model=MeResponse,
    summary="Get Current Admin",
)
async def me(
    current_admin: Admin = Depends(get_current_admin),
) -> MeResponse:
    return await get_me(current_admin)
