# app/services/email_brevo.py
import logging

import requests

from app.core.config import settings
from app.core.errors import NotificationError

logger = logging.getLogger(__name__)

BREVO_API = "https://api.brevo.com/v3/smtp/email"


def send_email_brevo(
    to_email: str,
    subject: str,
    html_content: str,
    text_content: str | None = None,
    api_key: str | None = None,
) -> dict:
    """
    Send one transactional email through Brevo.
    Raises NotificationError when the key is missing, the request fails, or Brevo rejects it.
    """
    key = api_key or settings.BREVO_API_KEY
    if not key:
        raise NotificationError("BREVO_API_KEY missing")

    payload = {
        "sender": {"email": settings.MAIL_FROM_EMAIL, "name": settings.MAIL_FROM_NAME},
        "to": [{"email": to_email}],
        "subject": subject,
        "htmlContent": html_content,
    }
    if text_content:
        payload["textContent"] = text_content

    try:
        r = requests.post(
            BREVO_API,
            json=payload,
            headers={
                "api-key": key,
                "accept": "application/json",
                "content-type": "application/json",
            },
            timeout=20,
        )
    except requests.RequestException as e:
        raise NotificationError(f"Brevo request failed: {e}") from e

    if r.status_code >= 400:
        key_tail = key[-4:] if isinstance(key, str) else "????"
        raise NotificationError(f"Brevo error {r.status_code} key_endswith={key_tail} body={r.text}")

    logger.info("Email sent: %s", subject)
    return r.json() if r.content else {}
