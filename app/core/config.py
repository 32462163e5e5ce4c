# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

DEFAULT_ADMIN_PASSWORD = "admin123"


class Settings(BaseSettings):
    APP_NAME: str = "Rental Inquiries API"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./inquiries.db")  # e.g. postgresql+psycopg2://...

    # Admin gate
    ADMIN_PASSWORD: str = DEFAULT_ADMIN_PASSWORD  # insecure default, override in every real deployment

    # Admin session tokens (JWT)
    SECRET_KEY: str | None = None  # falls back to ADMIN_PASSWORD when unset
    JWT_ALGO: str = "HS256"
    ADMIN_SESSION_EXPIRE_MIN: int = 60 * 8

    # Email notifications (Brevo); notifier is disabled without a key
    BREVO_API_KEY: str | None = None
    MAIL_FROM_EMAIL: str = "no-reply@example.com"
    MAIL_FROM_NAME: str = "Rental Inquiries"
    ADMIN_NOTIFICATION_EMAIL: str = "owner@example.com"

    CORS_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,  # allow DATABASE_URL or database_url, etc.
        extra="ignore",
    )



settings = Settings()


def insecure_config_warnings(s: Settings) -> list[str]:
    """Deployment problems worth shouting about at startup."""
    warnings = []
    if s.ADMIN_PASSWORD == DEFAULT_ADMIN_PASSWORD:
        warnings.append("ADMIN_PASSWORD is the insecure default; set it in the environment")
    if not s.SECRET_KEY:
        # a leaked session token would allow offline guessing of the admin password
        warnings.append("SECRET_KEY not set - admin session tokens are signed with ADMIN_PASSWORD")
    if not s.BREVO_API_KEY:
        warnings.append("BREVO_API_KEY not set - email notifications disabled")
    return warnings
