# app/db/models/inquiry.py
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.mixins import Base, TimestampMixin


def new_inquiry_id() -> str:
    return str(uuid.uuid4())


class Inquiry(TimestampMixin, Base):
    """Guest contact-form submission. Append-only: rows are never updated or deleted."""

    __tablename__ = "inquiries"

    # surrogate key, only used to break created_at ties by insertion order
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, default=new_inquiry_id)

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(Text)
    check_in: Mapped[Optional[str]] = mapped_column(Text)
    check_out: Mapped[Optional[str]] = mapped_column(Text)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Inquiry {self.id} {self.first_name} {self.last_name}>"
