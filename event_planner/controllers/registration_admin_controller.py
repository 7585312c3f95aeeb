# event_planner/controllers/registration_admin_controller.py
from __future__ import annotations

import csv
import io
import logging
from typing import Any, Iterable, Optional

from event_planner.controllers.registration_controller import first_key, options
from event_planner.core.timeutil import DATETIME_FORMAT, DATETIME_SECONDS_FORMAT, format_timestamp
from event_planner.repositories.event_repository import EventRepository

logger = logging.getLogger(__name__)

CSV_FILENAME = "event-registrations.csv"
CSV_HEADER = [
    "Full Name",
    "Email",
    "Event Date",
    "Event Name",
    "Category",
    "College",
    "Department",
    "Submitted",
]


def registration_filters(event_date: Optional[int], event_id: Optional[int]) -> dict[str, Any]:
    return {
        "event_date": int(event_date) if event_date else None,
        "event_id": int(event_id) if event_id else None,
    }


async def build_overview(
    repo: EventRepository,
    event_date: Optional[int] = None,
    event_id: Optional[int] = None,
) -> dict[str, Any]:
    """
    Admin filter state plus the matching rows.

    Unlike the public form, an unknown date or event falls back to the
    first option, so the table always shows something once events exist.
    """
    date_options = await repo.get_all_event_dates()
    if not date_options:
        return {"message": "No registrations available yet."}

    selected_date = str(event_date) if event_date else first_key(date_options)
    if selected_date not in date_options:
        selected_date = first_key(date_options)

    event_options = await repo.get_events_by_date(int(selected_date))
    selected_event = str(event_id) if event_id else first_key(event_options)
    if selected_event and int(selected_event) not in event_options:
        selected_event = first_key(event_options)

    filters = registration_filters(
        int(selected_date),
        int(selected_event) if selected_event else None,
    )
    registrations = await repo.get_registrations(filters)
    total = await repo.count_registrations(filters)

    rows = [
        {
            "id": r["id"],
            "full_name": r["full_name"],
            "email": r["email"],
            "event_date": format_timestamp(r["event_date"]),
            "college_name": r["college_name"],
            "department": r["department"],
            "submitted": format_timestamp(r["created"], DATETIME_FORMAT),
        }
        for r in registrations
    ]

    return {
        "event_dates": options(date_options),
        "event_date": selected_date,
        "events": options(event_options),
        "event_id": selected_event,
        "total": total,
        "total_label": f"Total participants: {total}",
        "rows": rows,
        "empty": None if rows else "No registrations found for the selected filters.",
    }


async def list_registrations(repo: EventRepository, event_date: Optional[int], event_id: Optional[int]) -> dict[str, Any]:
    filters = registration_filters(event_date, event_id)
    return {
        "total": await repo.count_registrations(filters),
        "items": await repo.get_registrations(filters),
    }


def registrations_csv(registrations: Iterable[dict[str, Any]]) -> str:
    """
    CRLF-terminated CSV. Fields are quoted only when they hold a comma,
    a quote or a line break; embedded quotes are doubled.
    """
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\r\n", quoting=csv.QUOTE_MINIMAL)
    w.writerow(CSV_HEADER)

    for r in registrations:
        w.writerow(
            [
                r["full_name"],
                r["email"],
                format_timestamp(r["event_date"]),
                r["event_name"],
                r["category"],
                r["college_name"],
                r["department"],
                format_timestamp(r["created"], DATETIME_SECONDS_FORMAT),
            ]
        )

    return buf.getvalue()


async def export_registrations(repo: EventRepository, event_date: Optional[int], event_id: Optional[int]) -> str:
    registrations = await repo.get_registrations(registration_filters(event_date, event_id))
    logger.info("Exporting %d registrations (event_date=%s, event_id=%s)", len(registrations), event_date, event_id)
    return registrations_csv(registrations)
