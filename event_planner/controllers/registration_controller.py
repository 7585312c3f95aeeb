# event_planner/controllers/registration_controller.py
from __future__ import annotations

import logging
import re
from typing import Any, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError

from event_planner.core.timeutil import format_timestamp
from event_planner.core.validation import ValidationResult, form_errors
from event_planner.repositories.event_repository import EventRepository
from event_planner.schemas.registrations import RegistrationIn
from event_planner.services.notification_service import EmailNotificationService

logger = logging.getLogger(__name__)

CLOSED_MESSAGE = "Registrations are currently closed. Please check back later."
THANK_YOU_MESSAGE = "Thank you for registering. A confirmation email has been sent."

_PLAIN_TEXT = re.compile(r"[A-Za-z0-9 ]+")

PLAIN_TEXT_FIELDS = {
    "full_name": "Full name",
    "college_name": "College name",
    "department": "Department",
}


def options(mapping: dict) -> list[dict[str, str]]:
    return [{"value": str(k), "label": v} for k, v in mapping.items()]


def first_key(mapping: dict) -> Optional[str]:
    return str(next(iter(mapping))) if mapping else None


def _duplicate_message(event_date: int) -> str:
    return f"You have already registered for an event on {format_timestamp(event_date)}."


# =========================================================
# ---------------------- FORM STATE -----------------------
# =========================================================

async def build_registration_form(
    repo: EventRepository,
    category: Optional[str] = None,
    event_date: Optional[int] = None,
    event_id: Optional[int] = None,
) -> dict[str, Any]:
    """
    Resolves the three dependent selects for the given choices.

    An unknown or closed category falls back to the first open one; an
    unknown date is cleared rather than replaced, which leaves the event
    select empty until a date is picked.
    """
    active = await repo.get_active_categories()
    if not active:
        return {"open": False, "message": CLOSED_MESSAGE}

    selected_category = category if category in active else first_key(active)

    date_options = await repo.get_event_dates_by_category(selected_category)
    selected_date = str(event_date) if event_date else first_key(date_options)
    if selected_date and selected_date not in date_options:
        selected_date = None

    event_options: dict[int, str] = {}
    if selected_date:
        event_options = await repo.get_events_by_category_and_date(selected_category, int(selected_date))

    selected_event = str(event_id) if event_id in event_options else first_key(event_options)

    return {
        "open": True,
        "categories": options(active),
        "category": selected_category,
        "event_dates": options(date_options),
        "event_date": selected_date,
        "events": options(event_options),
        "event_id": selected_event,
    }


async def list_active_categories(repo: EventRepository) -> list[dict[str, str]]:
    return options(await repo.get_active_categories())


async def list_event_dates(repo: EventRepository, category: str) -> list[dict[str, str]]:
    return options(await repo.get_event_dates_by_category(category))


async def list_events(repo: EventRepository, category: str, event_date: int) -> list[dict[str, str]]:
    return options(await repo.get_events_by_category_and_date(category, event_date))


# =========================================================
# ---------------------- VALIDATE / SUBMIT ----------------
# =========================================================

async def validate_registration(repo: EventRepository, payload: RegistrationIn) -> ValidationResult:
    """Read-only checks. On success result.data carries the resolved event."""
    result = ValidationResult()

    for name, label in PLAIN_TEXT_FIELDS.items():
        value = getattr(payload, name) or ""
        if not value.strip():
            result.add_error(name, f"{label} field is required.")
        elif not _PLAIN_TEXT.fullmatch(value):
            result.add_error(name, f"{label} may only contain letters, numbers, and spaces.")

    if not payload.category or not payload.event_date or not payload.event_id:
        result.add_error("event_id", "Please select a category, event date, and event.")
        return result

    # the options the client saw may be stale or hand-edited
    event = await repo.get_event(payload.event_id)
    stale = not event or event["category"] != payload.category or event["event_date"] != int(payload.event_date)
    if stale or not event["registration_start"] <= repo.now <= event["registration_end"]:
        result.add_error("event_id", "Selected event is no longer available. Please choose another.")
        return result

    email = str(payload.email).lower()
    if await repo.registration_exists(event["event_date"], email):
        logger.info("Duplicate registration rejected for %s on %s", email, event["event_date"])
        result.add_error("email", _duplicate_message(event["event_date"]))

    result.data["event"] = event
    return result


async def submit_registration(
    repo: EventRepository,
    notifier: EmailNotificationService,
    payload: RegistrationIn,
) -> dict[str, Any]:
    event = await repo.get_event(payload.event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Unable to locate the selected event.",
        )

    registration = {
        "event_id": event["id"],
        "full_name": payload.full_name,
        "email": str(payload.email).lower(),
        "college_name": payload.college_name,
        "department": payload.department,
        "category": event["category"],
        "event_date": event["event_date"],
        "event_name": event["event_name"],
    }

    # a concurrent submission can pass validation too; the unique key decides
    try:
        registration_id = await repo.create_registration(registration)
    except IntegrityError:
        await repo.db.rollback()
        logger.warning("Concurrent duplicate registration for %s on %s", registration["email"], event["event_date"])
        raise form_errors({"email": _duplicate_message(event["event_date"])})

    await repo.db.commit()
    logger.info("Registration %s saved for event %s (%s)", registration_id, event["id"], registration["email"])

    await notifier.notify(registration, repo.category_label(event["category"]))

    return {
        "message": THANK_YOU_MESSAGE,
        "registration": {**registration, "id": registration_id, "created": repo.now},
    }
