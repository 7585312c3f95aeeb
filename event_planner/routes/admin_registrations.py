from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from event_planner.controllers.registration_admin_controller import (
    CSV_FILENAME,
    build_overview,
    export_registrations,
    list_registrations,
)
from event_planner.controllers.registration_controller import options
from event_planner.core.dependencies import get_current_admin, get_event_repository
from event_planner.repositories.event_repository import EventRepository
from event_planner.schemas.registrations import (
    Option,
    RegistrationListOut,
    RegistrationOverviewOut,
)

router = APIRouter(prefix="/admin/registrations", tags=["Admin - Registrations"])


@router.get("", response_model=RegistrationListOut)
async def admin_list_registrations(
    event_date: Optional[int] = Query(None),
    event_id: Optional[int] = Query(None),
    repo: EventRepository = Depends(get_event_repository),
    admin=Depends(get_current_admin),
):
    return await list_registrations(repo, event_date, event_id)


@router.get("/overview", response_model=RegistrationOverviewOut)
async def admin_registrations_overview(
    event_date: Optional[int] = Query(None),
    event_id: Optional[int] = Query(None),
    repo: EventRepository = Depends(get_event_repository),
    admin=Depends(get_current_admin),
):
    return await build_overview(repo, event_date, event_id)


@router.get("/dates", response_model=List[Option])
async def admin_registration_dates(
    repo: EventRepository = Depends(get_event_repository),
    admin=Depends(get_current_admin),
):
    return options(await repo.get_all_event_dates())


@router.get("/events", response_model=List[Option])
async def admin_registration_events(
    event_date: int = Query(...),
    repo: EventRepository = Depends(get_event_repository),
    admin=Depends(get_current_admin),
):
    return options(await repo.get_events_by_date(event_date))


@router.get("/export")
async def admin_export_registrations(
    event_date: Optional[int] = Query(None),
    event_id: Optional[int] = Query(None),
    repo: EventRepository = Depends(get_event_repository),
    admin=Depends(get_current_admin),
):
    body = await export_registrations(repo, event_date, event_id)
    return StreamingResponse(
        iter([body]),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
