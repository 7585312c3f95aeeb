from typing import Any, Optional

from pydantic import BaseModel, EmailStr, field_validator


class SettingsIn(BaseModel):
    notify_admin: bool = False
    admin_notification_email: Optional[EmailStr] = None

    # an emptied form field arrives as ""
    @field_validator("admin_notification_email", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SettingsOut(BaseModel):
    notify_admin: bool
    admin_notification_email: Optional[str] = None
    message: Optional[str] = None
