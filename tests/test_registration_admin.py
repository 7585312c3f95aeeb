from conftest import DAY, DAY0, add_event, add_registration, ts_date
from event_planner.controllers.registration_admin_controller import CSV_HEADER, registrations_csv

DAY3 = DAY0 + 3 * DAY
DAY4 = DAY0 + 4 * DAY


def _row(**overrides):
    row = {
        "full_name": "Jane Doe",
        "email": "jane@x.com",
        "event_date": DAY3,
        "event_name": "AI Workshop",
        "category": "online_workshop",
        "college_name": "MIT",
        "department": "CS",
        "created": DAY0 + 3661,
    }
    row.update(overrides)
    return row


def test_csv_header_and_line_endings():
    out = registrations_csv([_row()])
    assert out == (
        "Full Name,Email,Event Date,Event Name,Category,College,Department,Submitted\r\n"
        f"Jane Doe,jane@x.com,{ts_date(DAY3)},AI Workshop,online_workshop,MIT,CS,{ts_date(DAY0)} 01:01:01\r\n"
    )


def test_csv_quotes_commas_and_doubles_quotes():
    out = registrations_csv([_row(full_name='O\'Brien, "Jr."')])
    line = out.split("\r\n")[1]
    assert line.startswith('"O\'Brien, ""Jr."""' + ",jane@x.com,")


def test_csv_quotes_embedded_newlines():
    out = registrations_csv([_row(department="Computer\nScience")])
    assert '"Computer\nScience"' in out


def test_csv_of_nothing_is_just_the_header():
    assert registrations_csv([]) == ",".join(CSV_HEADER) + "\r\n"


async def test_overview_without_events(client):
    r = await client.get("/api/admin/registrations/overview")
    assert r.status_code == 200
    assert r.json()["message"] == "No registrations available yet."
    assert r.json()["rows"] == []


async def test_overview_defaults_and_fallbacks(client, db):
    morning = await add_event(db, name="Morning", event_date=DAY3)
    await add_event(db, name="Afternoon", event_date=DAY3)
    later = await add_event(db, name="Later", event_date=DAY4)

    await add_registration(db, morning, email="a@x.com", created=DAY0 + 100)
    await add_registration(db, morning, email="b@x.com", full_name="Bob Stone", created=DAY0 + 200)
    await add_registration(db, later, email="c@x.com", created=DAY0 + 300)

    r = await client.get("/api/admin/registrations/overview")
    body = r.json()
    assert body["event_date"] == str(DAY3)
    # events on the first date, by name: Afternoon, Morning
    assert [e["label"] for e in body["events"]] == ["Afternoon", "Morning"]
    assert body["total"] == 0
    assert body["empty"] == "No registrations found for the selected filters."

    body = (await client.get(
        "/api/admin/registrations/overview", params={"event_date": DAY3, "event_id": morning},
    )).json()
    assert body["event_id"] == str(morning)
    assert body["total"] == 2
    assert body["total_label"] == "Total participants: 2"
    assert [row["email"] for row in body["rows"]] == ["b@x.com", "a@x.com"]
    assert body["rows"][0]["submitted"] == f"{ts_date(DAY0)} 00:03"
    assert body["rows"][0]["event_date"] == ts_date(DAY3)

    # an event from another day falls back to the first event of the chosen day
    body = (await client.get(
        "/api/admin/registrations/overview", params={"event_date": DAY3, "event_id": later},
    )).json()
    assert body["event_id"] != str(later)
    assert body["event_date"] == str(DAY3)

    # an unknown date falls back to the first date
    body = (await client.get(
        "/api/admin/registrations/overview", params={"event_date": DAY0 + 99 * DAY},
    )).json()
    assert body["event_date"] == str(DAY3)


async def test_admin_cascading_filters_and_list(client, db):
    morning = await add_event(db, name="Morning", event_date=DAY3)
    later = await add_event(db, name="Later", event_date=DAY4)
    await add_registration(db, morning, email="a@x.com")
    await add_registration(db, later, email="b@x.com")

    dates = (await client.get("/api/admin/registrations/dates")).json()
    assert [d["value"] for d in dates] == [str(DAY3), str(DAY4)]

    events = (await client.get("/api/admin/registrations/events", params={"event_date": DAY4})).json()
    assert events == [{"value": str(later), "label": "Later"}]

    listing = (await client.get("/api/admin/registrations", params={"event_date": DAY4})).json()
    assert listing["total"] == 1
    assert listing["items"][0]["email"] == "b@x.com"

    everything = (await client.get("/api/admin/registrations")).json()
    assert everything["total"] == 2


async def test_export_streams_csv_attachment(client, db):
    event_id = await add_event(db, name="AI Workshop", event_date=DAY3)
    await add_registration(db, event_id, email="obrien@x.com", full_name='O\'Brien, "Jr."', created=DAY0 + 5)
    other = await add_event(db, name="Other", event_date=DAY4)
    await add_registration(db, other, email="z@x.com")

    r = await client.get("/api/admin/registrations/export", params={"event_date": DAY3, "event_id": event_id})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert r.headers["content-disposition"] == 'attachment; filename="event-registrations.csv"'

    lines = r.text.split("\r\n")
    assert lines[0] == "Full Name,Email,Event Date,Event Name,Category,College,Department,Submitted"
    assert lines[1] == (
        f'"O\'Brien, ""Jr.""",obrien@x.com,{ts_date(DAY3)},AI Workshop,online_workshop,MIT,CS,'
        f"{ts_date(DAY0)} 00:00:05"
    )
    assert lines[2:] == [""]
