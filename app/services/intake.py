# app/services/intake.py
from __future__ import annotations

import logging
from typing import Any, Optional

from app.core.errors import InquiryValidationError
from app.db.models.inquiry import Inquiry
from app.schemas.inquiry import validate_inquiry
from app.services.inquiry_notifier import InquiryNotifier
from app.services.inquiry_store import InquiryStore

logger = logging.getLogger(__name__)


class InquiryIntakeService:
    """
    validate -> persist -> best-effort notify.

    The result depends only on validation and persistence. Nothing is retried and
    there is no dedup key, so the same form submitted twice yields two records.
    """

    def __init__(self, store: InquiryStore, notifier: Optional[InquiryNotifier] = None):
        self.store = store
        self.notifier = notifier

    def submit(self, raw: Any) -> Inquiry:
        """
        Raises InquiryValidationError (nothing persisted) or StorageError.
        """
        try:
            data = validate_inquiry(raw)
        except InquiryValidationError as e:
            logger.info("Inquiry rejected, invalid fields: %s", ", ".join(e.fields))
            raise

        inquiry = self.store.create(data)
        logger.info("Inquiry %s created", inquiry.id)

        if self.notifier is not None:
            self.notifier.notify(inquiry)
        return inquiry

    def list(self) -> list[Inquiry]:
        return self.store.list()
