# app/services/inquiry_notifier.py
from __future__ import annotations

import html
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from app.core.config import settings
from app.core.errors import NotificationError
from app.db.models.inquiry import Inquiry
from app.services.email_brevo import send_email_brevo

logger = logging.getLogger(__name__)

NOT_PROVIDED = "Not provided"
NOT_SPECIFIED = "Not specified"


def _received(ts: datetime) -> str:
    # SQLite hands back naive datetimes; they were written as UTC
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


def inquiry_subject(inquiry: Inquiry) -> str:
    return f"New inquiry from {inquiry.first_name} {inquiry.last_name}"


def inquiry_summary_text(inquiry: Inquiry) -> str:
    return "\n".join([
        "New inquiry received!",
        "",
        f"Guest: {inquiry.first_name} {inquiry.last_name}",
        f"Email: {inquiry.email}",
        f"Phone: {inquiry.phone or NOT_PROVIDED}",
        f"Check-in: {inquiry.check_in or NOT_SPECIFIED}",
        f"Check-out: {inquiry.check_out or NOT_SPECIFIED}",
        "",
        "Message:",
        inquiry.message,
        "",
        f"Received: {_received(inquiry.created_at)}",
    ])


def inquiry_summary_html(inquiry: Inquiry) -> str:
    e = html.escape
    return (
        "<h2>New inquiry received!</h2>"
        f"<p><strong>Guest:</strong> {e(inquiry.first_name)} {e(inquiry.last_name)}</p>"
        f"<p><strong>Email:</strong> {e(inquiry.email)}</p>"
        f"<p><strong>Phone:</strong> {e(inquiry.phone or NOT_PROVIDED)}</p>"
        f"<p><strong>Check-in:</strong> {e(inquiry.check_in or NOT_SPECIFIED)}</p>"
        f"<p><strong>Check-out:</strong> {e(inquiry.check_out or NOT_SPECIFIED)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{e(inquiry.message)}</p>"
        f"<p><strong>Received:</strong> {_received(inquiry.created_at)}</p>"
    )


class InquiryNotifier:
    """
    Emails the operator about a new inquiry.
    notify() never raises: False means "not configured" or "delivery failed".
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        to_email: Optional[str] = None,
        send: Callable[..., dict] = send_email_brevo,
    ):
        self.api_key = settings.BREVO_API_KEY if api_key is None else api_key
        self.to_email = to_email or settings.ADMIN_NOTIFICATION_EMAIL
        self._send = send

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def notify(self, inquiry: Inquiry) -> bool:
        subject = inquiry_subject(inquiry)
        if not self.enabled:
            logger.info("Email notifications disabled (no BREVO_API_KEY); skipped: %s", subject)
            return False

        try:
            self._send(
                to_email=self.to_email,
                subject=subject,
                html_content=inquiry_summary_html(inquiry),
                text_content=inquiry_summary_text(inquiry),
                api_key=self.api_key,
            )
        except NotificationError as e:
            logger.error("Failed to send inquiry notification %s: %s", inquiry.id, e)
            return False
        except Exception:
            # a broken transport must never reach the guest-facing path
            logger.exception("Unexpected error sending inquiry notification %s", inquiry.id)
            return False
        return True
