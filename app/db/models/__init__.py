# app/db/models/__init__.py
from .inquiry import Inquiry
