from datetime import date, datetime
from typing import Optional, List

from pydantic import BaseModel, Field


# ------------------ EVENT CONFIG ------------------

class EventCreateIn(BaseModel):
    event_name: str = Field(min_length=1, max_length=255)
    category: str
    # naive values are read as site time
    registration_start: datetime
    registration_end: datetime
    event_date: date

    model_config = {
        "json_schema_extra": {
            "example": {
                "event_name": "AI Workshop",
                "category": "online_workshop",
                "registration_start": "2026-11-01T09:00:00",
                "registration_end": "2026-11-07T18:00:00",
                "event_date": "2026-11-10",
            }
        }
    }


class EventOut(BaseModel):
    id: int
    event_name: str
    category: str
    category_label: str
    registration_start: int
    registration_end: int
    event_date: int
    created: int

    # display values (site time)
    registration_start_display: str
    registration_end_display: str
    event_date_display: str


class EventCreateOut(BaseModel):
    message: str
    event: EventOut


class EventConfigOut(BaseModel):
    """What the admin needs to render the create form and the events table."""
    categories: dict[str, str]
    events: List[EventOut]
    empty: Optional[str] = None
