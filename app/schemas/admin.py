# app/schemas/admin.py
from datetime import datetime

from pydantic import BaseModel

from app.schemas.inquiry import CamelModel


class AdminSessionIn(BaseModel):
    password: str


class AdminSessionOut(CamelModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_at: datetime
