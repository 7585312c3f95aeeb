import json

import httpx

from event_planner.core.email_service import BREVO_SEND_URL, BrevoMailer, render_message

PARAMS = {
    "full_name": "Jane Doe",
    "event_name": "AI Workshop",
    "event_date": "2027-01-18",
    "category": "Online Workshop",
    "email": "jane@x.com",
    "college_name": "MIT",
    "department": "CS",
}


def test_render_message_escapes_params():
    subject, body = render_message("admin_notification", {**PARAMS, "department": "<b>CS</b>"})
    assert subject == "New registration: AI Workshop"
    assert "&lt;b&gt;CS&lt;/b&gt;" in body
    assert "jane@x.com" in body


async def test_mail_posts_to_brevo():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"messageId": "abc"})

    mailer = BrevoMailer(api_key="k-123", from_email="events@x.com", transport=httpx.MockTransport(handler))
    assert await mailer.mail("user_confirmation", "jane@x.com", PARAMS) is True

    assert len(seen) == 1
    assert str(seen[0].url) == BREVO_SEND_URL
    assert seen[0].headers["api-key"] == "k-123"
    payload = json.loads(seen[0].content)
    assert payload["to"] == [{"email": "jane@x.com", "name": "Jane Doe"}]
    assert payload["sender"]["email"] == "events@x.com"
    assert payload["subject"] == "Registration confirmed: AI Workshop"
    assert "2027-01-18" in payload["htmlContent"]


async def test_mail_failures_are_reported_not_raised():
    def rejecting(request):
        return httpx.Response(500, text="boom")

    def unreachable(request):
        raise httpx.ConnectError("no route", request=request)

    for handler in (rejecting, unreachable):
        mailer = BrevoMailer(api_key="k-123", transport=httpx.MockTransport(handler))
        assert await mailer.mail("user_confirmation", "jane@x.com", PARAMS) is False


async def test_mail_skipped_without_api_key():
    def handler(request):
        raise AssertionError("no request expected")

    mailer = BrevoMailer(api_key="", transport=httpx.MockTransport(handler))
    assert await mailer.mail("user_confirmation", "jane@x.com", PARAMS) is False
