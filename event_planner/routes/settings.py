from fastapi import APIRouter, Depends

from event_planner.controllers.settings_controller import (
    get_notification_settings,
    save_notification_settings,
    validate_settings,
)
from event_planner.core.dependencies import get_config_store, get_current_admin
from event_planner.repositories.config_store import ConfigStore
from event_planner.schemas.settings import SettingsIn, SettingsOut

router = APIRouter(prefix="/admin/settings", tags=["Admin - Settings"])


@router.get("", response_model=SettingsOut)
async def read_settings(
    store: ConfigStore = Depends(get_config_store),
    admin=Depends(get_current_admin),
):
    return await get_notification_settings(store)


@router.put("", response_model=SettingsOut)
async def update_settings(
    payload: SettingsIn,
    store: ConfigStore = Depends(get_config_store),
    admin=Depends(get_current_admin),
):
    validate_settings(payload).raise_for_errors()
    return await save_notification_settings(store, payload)
