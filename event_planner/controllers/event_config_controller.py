# event_planner/controllers/event_config_controller.py
from __future__ import annotations

import logging
from typing import Any

from event_planner.core.timeutil import (
    DATETIME_FORMAT,
    day_start_timestamp,
    end_of_day_timestamp,
    format_timestamp,
    site_date,
    to_timestamp,
)
from event_planner.core.validation import ValidationResult
from event_planner.repositories.event_repository import EventRepository
from event_planner.schemas.events import EventCreateIn

logger = logging.getLogger(__name__)

ILLEGAL_CHOICE = "An illegal choice has been detected. Please contact the site administrator."


def event_out_dict(repo: EventRepository, event: dict[str, Any]) -> dict[str, Any]:
    return {
        **event,
        "category_label": repo.category_label(event["category"]),
        "registration_start_display": format_timestamp(event["registration_start"], DATETIME_FORMAT),
        "registration_end_display": format_timestamp(event["registration_end"], DATETIME_FORMAT),
        "event_date_display": format_timestamp(event["event_date"]),
    }


async def build_event_config(repo: EventRepository) -> dict[str, Any]:
    events = [event_out_dict(repo, ev) for ev in await repo.get_events()]
    return {
        "categories": repo.get_categories(),
        "events": events,
        "empty": None if events else "No events configured yet.",
    }


def validate_event(payload: EventCreateIn, categories: dict[str, str]) -> ValidationResult:
    result = ValidationResult()

    if not payload.event_name.strip():
        result.add_error("event_name", "Event name field is required.")

    if payload.category not in categories:
        result.add_error("category", ILLEGAL_CHOICE)

    start = payload.registration_start
    if to_timestamp(start) > to_timestamp(payload.registration_end):
        result.add_error("registration_end", "Registration end must be after the start.")

    # compared as calendar days: an event on the opening day is allowed
    if payload.event_date < site_date(start):
        result.add_error("event_date", "Event date must be after registration start.")

    return result


async def create_event(repo: EventRepository, payload: EventCreateIn) -> dict[str, Any]:
    """Stores a validated event. The window closes at 23:59:59 of the chosen end day."""
    values = {
        "event_name": payload.event_name,
        "category": payload.category,
        "registration_start": to_timestamp(payload.registration_start),
        "registration_end": end_of_day_timestamp(payload.registration_end),
        "event_date": day_start_timestamp(payload.event_date),
    }

    event_id = await repo.create_event(values)
    await repo.db.commit()
    logger.info("Event %s saved (id=%s, category=%s)", values["event_name"], event_id, values["category"])

    event = await repo.get_event(event_id)
    return {
        "message": f"Event {values['event_name']} saved.",
        "event": event_out_dict(repo, event),
    }
