# contact_relay/core/mailer.py
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from contact_relay.core.settings import settings
from contact_relay.lib.email_templates import build_subject, render_html, render_text
from contact_relay.lib.validation import Submission

log = logging.getLogger("uvicorn.error")

SEND_FAILED = "Failed to send email. Please try again later."


@dataclass(frozen=True)
class DeliveryOutcome:
    ok: bool
    message_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, message_id: str) -> "DeliveryOutcome":
        return cls(ok=True, message_id=message_id)

    @classmethod
    def failure(cls, reason: str = SEND_FAILED) -> "DeliveryOutcome":
        return cls(ok=False, error=reason)


def build_payload(sub: Submission) -> Dict[str, Any]:
    return {
        "from": settings.mail_from,
        "to": [settings.mail_to],
        "reply_to": sub.email,
        "subject": build_subject(sub),
        "html": render_html(sub),
        "text": render_text(sub),
    }


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.mail_api_timeout)


async def send_contact_email(sub: Submission) -> DeliveryOutcome:
    """Relay one submission to the mail API. Single attempt, never raises."""
    if not settings.resend_api_key or not settings.resend_api_key.get_secret_value():
        log.error("[mailer] RESEND_API_KEY is not configured; dropping submission")
        return DeliveryOutcome.failure()

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.resend_api_key.get_secret_value()}",
    }
    try:
        async with _http_client() as client:
            response = await client.post(
                settings.mail_api_url,
                json=build_payload(sub),
                headers=headers,
            )
    except httpx.HTTPError as exc:
        log.error(f"[mailer] transport error sending email: {exc!r}")
        return DeliveryOutcome.failure()

    if not response.is_success:
        log.error(f"[mailer] mail API error {response.status_code}: {response.text}")
        return DeliveryOutcome.failure()

    try:
        body = response.json()
    except ValueError as exc:
        log.error(f"[mailer] unparseable mail API response: {exc}")
        return DeliveryOutcome.failure()

    message_id = body.get("id") if isinstance(body, dict) else None
    if not isinstance(message_id, str) or not message_id:
        log.error(f"[mailer] mail API response has no message id: {body!r}")
        return DeliveryOutcome.failure()

    log.info(f"[mailer] email sent, id={message_id}")
    return DeliveryOutcome.success(message_id)
