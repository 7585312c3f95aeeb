import html
import logging

import httpx

from event_planner.core.config import settings

logger = logging.getLogger(__name__)

BREVO_SEND_URL = "https://api.brevo.com/v3/smtp/email"


# subject / body per message key; params are HTML-escaped before formatting
MESSAGE_TEMPLATES = {
    "user_confirmation": {
        "subject": "Registration confirmed: {event_name}",
        "body": """
    <div style="font-family:Arial,sans-serif;max-width:560px;margin:auto;padding:24px">
      <h2 style="margin:0 0 12px 0;">Hi {full_name},</h2>
      <p style="margin:0 0 16px 0;color:#444;line-height:1.5;">
        Thank you for registering for <strong>{event_name}</strong> ({category}) on {event_date}.
      </p>
      <p style="margin:0;color:#444;line-height:1.5;">
        College: {college_name}<br>
        Department: {department}
      </p>
    </div>
    """,
    },
    "admin_notification": {
        "subject": "New registration: {event_name}",
        "body": """
    <div style="font-family:Arial,sans-serif;max-width:560px;margin:auto;padding:24px">
      <h2 style="margin:0 0 12px 0;">New registration</h2>
      <p style="margin:0;color:#444;line-height:1.5;">
        Name: {full_name}<br>
        Email: {email}<br>
        Event: {event_name} ({category})<br>
        Event date: {event_date}<br>
        College: {college_name}<br>
        Department: {department}
      </p>
    </div>
    """,
    },
}


def render_message(key: str, params: dict) -> tuple[str, str]:
    template = MESSAGE_TEMPLATES[key]
    subject = template["subject"].format(**params)
    body = template["body"].format(**{k: html.escape(str(v)) for k, v in params.items()})
    return subject, body


class BrevoMailer:
    """
    Sends transactional mail through the Brevo (Sendinblue) HTTP API.

    Delivery is fire-and-forget: mail() reports success as a bool and never
    raises for transport problems, so a registration is never rolled back
    because a mail server was unreachable.
    """

    def __init__(
        self,
        api_key: str | None = None,
        from_email: str | None = None,
        from_name: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.SENDINBLUE_API_KEY if api_key is None else api_key
        self.from_email = from_email or settings.EMAIL_FROM
        self.from_name = from_name or settings.EMAIL_FROM_NAME
        self.transport = transport

    async def mail(self, key: str, to_email: str, params: dict) -> bool:
        subject, body = render_message(key, params)

        if not self.api_key:
            logger.warning("SENDINBLUE_API_KEY not configured, skipped %s mail to %s", key, to_email)
            return False

        payload = {
            "sender": {"name": self.from_name, "email": self.from_email},
            "to": [{"email": to_email, "name": params.get("full_name") or to_email}],
            "subject": subject,
            "htmlContent": body,
        }

        try:
            async with httpx.AsyncClient(timeout=20, transport=self.transport) as client:
                r = await client.post(
                    BREVO_SEND_URL,
                    headers={"api-key": self.api_key, "Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.HTTPError:
            logger.exception("Unable to send %s mail to %s", key, to_email)
            return False

        if r.status_code >= 400:
            logger.error("Sendinblue error %s for %s mail to %s: %s", r.status_code, key, to_email, r.text)
            return False

        logger.info("Sent %s mail to %s", key, to_email)
        return True


def get_mailer() -> BrevoMailer:
    return BrevoMailer()
