# app/api/admin.py
import logging

from fastapi import APIRouter, Depends

from app.core.deps import get_authenticator
from app.core.errors import AuthError
from app.core.security import AdminAuthenticator
from app.schemas.admin import AdminSessionIn, AdminSessionOut
from app.schemas.inquiry import ErrorOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/session", response_model=AdminSessionOut, responses={401: {"model": ErrorOut}})
def create_session(
    data: AdminSessionIn,
    authenticator: AdminAuthenticator = Depends(get_authenticator),
):
    """
    Exchange the admin password for a signed session token.
    Send it back as 'Authorization: Bearer <token>' on GET /api/inquiries.
    """
    try:
        token, expires_at = authenticator.issue_session(data.password)
    except ValueError:
        logger.warning("Admin login failed")
        raise AuthError("Invalid admin credentials")
    return AdminSessionOut(token=token, expires_at=expires_at)
