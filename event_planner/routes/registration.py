# event_planner/routes/registration.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from event_planner.controllers.registration_controller import (
    build_registration_form,
    list_active_categories,
    list_event_dates,
    list_events,
    submit_registration,
    validate_registration,
)
from event_planner.core.dependencies import get_event_repository, get_notification_service
from event_planner.repositories.event_repository import EventRepository
from event_planner.schemas.registrations import (
    Option,
    RegistrationCreateOut,
    RegistrationFormOut,
    RegistrationIn,
)
from event_planner.services.notification_service import EmailNotificationService

router = APIRouter(prefix="/registration", tags=["Registration"])


@router.get("/form", response_model=RegistrationFormOut)
async def registration_form(
    category: Optional[str] = Query(None),
    event_date: Optional[int] = Query(None),
    event_id: Optional[int] = Query(None),
    repo: EventRepository = Depends(get_event_repository),
):
    return await build_registration_form(repo, category, event_date, event_id)


# ── dependent selects ─────────────────────────────────────────────────

@router.get("/categories", response_model=List[Option])
async def registration_categories(repo: EventRepository = Depends(get_event_repository)):
    return await list_active_categories(repo)


@router.get("/dates", response_model=List[Option])
async def registration_dates(
    category: str = Query(...),
    repo: EventRepository = Depends(get_event_repository),
):
    return await list_event_dates(repo, category)


@router.get("/events", response_model=List[Option])
async def registration_events(
    category: str = Query(...),
    event_date: int = Query(...),
    repo: EventRepository = Depends(get_event_repository),
):
    return await list_events(repo, category, event_date)


@router.post("", response_model=RegistrationCreateOut, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegistrationIn,
    repo: EventRepository = Depends(get_event_repository),
    notifier: EmailNotificationService = Depends(get_notification_service),
):
    result = await validate_registration(repo, payload)
    result.raise_for_errors()
    return await submit_registration(repo, notifier, payload)
