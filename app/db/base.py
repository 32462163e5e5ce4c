from app.db.mixins import Base   # ✅ import Base from mixins

# Import all models so Alembic can detect them
from app.db.models.inquiry import Inquiry  # noqa: F401
