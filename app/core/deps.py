# app/core/deps.py
import logging
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.core.errors import AuthError
from app.core.security import AdminAuthenticator, bearer_token
from app.db.session import SessionLocal
from app.services.inquiry_notifier import InquiryNotifier
from app.services.inquiry_store import InquiryStore
from app.services.intake import InquiryIntakeService

logger = logging.getLogger(__name__)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_inquiry_store(db: Session = Depends(get_db)) -> InquiryStore:
    return InquiryStore(db)


def get_notifier() -> InquiryNotifier:
    return InquiryNotifier()


def get_intake_service(
    store: InquiryStore = Depends(get_inquiry_store),
    notifier: InquiryNotifier = Depends(get_notifier),
) -> InquiryIntakeService:
    return InquiryIntakeService(store, notifier)


def get_authenticator() -> AdminAuthenticator:
    # built per request so settings changes (and test overrides) take effect
    return AdminAuthenticator()


def require_admin(
    authorization: Optional[str] = Header(None),
    authenticator: AdminAuthenticator = Depends(get_authenticator),
) -> None:
    """
    Gate for operator-only routes:
    - reads Authorization: Bearer <admin password or session token>
    - raises AuthError (401) when missing or wrong
    """
    credential = bearer_token(authorization)
    if credential is None:
        logger.warning("Admin request without bearer credentials")
        raise AuthError("Admin access required - please provide authorization")
    if not authenticator.check(credential):
        logger.warning("Admin request with invalid credentials")
        raise AuthError("Invalid admin credentials")
