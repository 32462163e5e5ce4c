# app/core/errors.py
from __future__ import annotations

from typing import TypedDict


class FieldIssue(TypedDict):
    field: str
    issue: str


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InquiryValidationError(AppError):
    status_code = 400
    message = "Validation failed"

    def __init__(self, details: list[FieldIssue]):
        super().__init__()
        self.details = details

    @property
    def fields(self) -> list[str]:
        return [d["field"] for d in self.details]


class AuthError(AppError):
    status_code = 401
    message = "Invalid admin credentials"


class StorageError(AppError):
    status_code = 500
    message = "Storage failure"


class NotificationError(AppError):
    # never rendered over HTTP; the notifier swallows it
    message = "Notification delivery failed"
