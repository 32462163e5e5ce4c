"""
Shared fixtures: in-memory SQLite, a recording email sender, and a TestClient
wired to both through FastAPI dependency overrides.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.db.models  # noqa: F401
from app.core.config import settings
from app.core.deps import get_db, get_notifier
from app.core.errors import NotificationError
from app.db.mixins import Base
from app.db.models.inquiry import Inquiry, new_inquiry_id
from app.main import app as fastapi_app
from app.services.inquiry_notifier import InquiryNotifier
from app.services.inquiry_store import InquiryStore

ADMIN_SECRET = "s3cret-test-password"


class RecordingSender:
    """Stands in for send_email_brevo; records calls, optionally fails."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[dict] = []

    def __call__(self, **kwargs) -> dict:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"messageId": "<test@brevo>"}


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def store(db_session):
    return InquiryStore(db_session)


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def failing_sender():
    return RecordingSender(error=NotificationError("Brevo error 500"))


@pytest.fixture
def notifier(sender):
    return InquiryNotifier(api_key="test-key", to_email="owner@example.com", send=sender)


@pytest.fixture
def admin_settings(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_SECRET)
    monkeypatch.setattr(settings, "SECRET_KEY", "test-signing-key")
    return settings


@pytest.fixture
def client(session_factory, notifier, admin_settings):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_notifier] = lambda: notifier
    # no context manager: startup (create_all on the real engine) must not run
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def valid_payload():
    return {
        "firstName": "Sarah",
        "lastName": "Lee",
        "email": "s@example.com",
        "message": "Is Dec 15-17 available?",
    }


@pytest.fixture
def full_payload(valid_payload):
    return {
        **valid_payload,
        "phone": "+1 555 0100",
        "checkIn": "2026-12-15",
        "checkOut": "2026-12-17",
    }


@pytest.fixture
def sample_inquiry():
    """Transient Inquiry, never added to a session."""
    return Inquiry(
        id=new_inquiry_id(),
        first_name="Sarah",
        last_name="Lee",
        email="s@example.com",
        phone=None,
        check_in=None,
        check_out=None,
        message="Is Dec 15-17 available?",
        created_at=datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc),
    )
