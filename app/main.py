# app/main.py
import logging

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text

from app.core.config import settings, insecure_config_warnings
from app.core.deps import get_db
from app.core.errors import AppError, InquiryValidationError
from app.core.logging import configure_logging
from app.db.session import engine
from app.db.mixins import Base
from app.schemas.inquiry import issues_from_errors
# ✅ CRITICAL: load DB models so Base.metadata is populated
import app.db.models  # noqa: F401

# Routers
from app.api.inquiries import router as inquiries_router
from app.api.admin import router as admin_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("create_all done. Tables: %s", list(Base.metadata.tables.keys()))
    for message in insecure_config_warnings(settings):
        logger.warning(message)


# Errors -> {success: false, error, details?}
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    body = {"success": False, "error": exc.message}
    if isinstance(exc, InquiryValidationError):
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed JSON or a body FastAPI itself could not parse
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": InquiryValidationError.message,
            "details": issues_from_errors(list(exc.errors())),
        },
    )


# Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(inquiries_router, prefix="/api", tags=["inquiries"])
app.include_router(admin_router, prefix="/api", tags=["admin"])


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


@app.get("/debug/db-ping")
def db_ping(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"db": "ok"}
