from typing import Optional, List

from pydantic import BaseModel, EmailStr, Field


# ------------------ PUBLIC FORM ------------------

class Option(BaseModel):
    value: str
    label: str


class RegistrationIn(BaseModel):
    full_name: str = Field(max_length=255)
    email: EmailStr
    college_name: str = Field(max_length=255)
    department: str = Field(max_length=255)

    # selection is checked by the validation step, so all three may be missing here
    category: Optional[str] = None
    event_date: Optional[int] = None
    event_id: Optional[int] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "full_name": "Jane Doe",
                "email": "jane@example.com",
                "college_name": "MIT",
                "department": "CS",
                "category": "online_workshop",
                "event_date": 1793318400,
                "event_id": 1,
            }
        }
    }


class RegistrationFormOut(BaseModel):
    open: bool
    message: Optional[str] = None

    categories: List[Option] = []
    category: Optional[str] = None

    event_dates: List[Option] = []
    event_date: Optional[str] = None

    events: List[Option] = []
    event_id: Optional[str] = None


class RegistrationOut(BaseModel):
    id: int
    event_id: int
    full_name: str
    email: str
    college_name: str
    department: str
    category: str
    event_date: int
    event_name: str
    created: int


class RegistrationCreateOut(BaseModel):
    message: str
    registration: RegistrationOut


# ------------------ ADMIN ------------------

class RegistrationRowOut(BaseModel):
    id: int
    full_name: str
    email: str
    event_date: str
    college_name: str
    department: str
    submitted: str


class RegistrationListOut(BaseModel):
    total: int
    items: List[RegistrationOut]


class RegistrationOverviewOut(BaseModel):
    message: Optional[str] = None

    event_dates: List[Option] = []
    event_date: Optional[str] = None

    events: List[Option] = []
    event_id: Optional[str] = None

    total: int = 0
    total_label: Optional[str] = None
    rows: List[RegistrationRowOut] = []
    empty: Optional[str] = None
