# event_planner/routes/events.py
from fastapi import APIRouter, Depends, status

from event_planner.controllers.event_config_controller import (
    build_event_config,
    create_event,
    validate_event,
)
from event_planner.core.dependencies import get_current_admin, get_event_repository
from event_planner.repositories.event_repository import EventRepository
from event_planner.schemas.events import EventConfigOut, EventCreateIn, EventCreateOut

router = APIRouter(prefix="/admin/events", tags=["Admin - Events"])


@router.get("", response_model=EventConfigOut)
async def admin_event_config(
    repo: EventRepository = Depends(get_event_repository),
    admin=Depends(get_current_admin),
):
    return await build_event_config(repo)


@router.post("", response_model=EventCreateOut, status_code=status.HTTP_201_CREATED)
async def admin_create_event(
    payload: EventCreateIn,
    repo: EventRepository = Depends(get_event_repository),
    admin=Depends(get_current_admin),
):
    validate_event(payload, repo.get_categories()).raise_for_errors()
    return await create_event(repo, payload)
