# app/services/inquiry_store.py
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.db.models.inquiry import Inquiry
from app.schemas.inquiry import InquiryCreate

logger = logging.getLogger(__name__)


class InquiryStore:
    """
    Append-only persistence for inquiries. There is deliberately no update/delete.
    Each create is a single commit; on any database error the session is rolled back
    and StorageError is raised with the original exception chained.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: InquiryCreate) -> Inquiry:
        # id, seq and created_at are filled in at flush; expire_on_commit=False keeps them loaded
        inquiry = Inquiry(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            check_in=data.check_in,
            check_out=data.check_out,
            message=data.message,
        )
        try:
            self.db.add(inquiry)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to persist inquiry")
            raise StorageError("Failed to create inquiry") from e
        return inquiry

    def list(self) -> list[Inquiry]:
        """All inquiries, newest first; equal timestamps fall back to insertion order."""
        stmt = select(Inquiry).order_by(Inquiry.created_at.desc(), Inquiry.seq.desc())
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            logger.exception("Failed to load inquiries")
            raise StorageError("Failed to fetch inquiries") from e

    def count(self) -> int:
        try:
            return self.db.scalar(select(func.count()).select_from(Inquiry)) or 0
        except SQLAlchemyError as e:
            logger.exception("Failed to count inquiries")
            raise StorageError("Failed to count inquiries") from e
