from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_EVENT_CATEGORIES = {
    "online_workshop": "Online Workshop",
    "hackathon": "Hackathon",
    "conference": "Conference",
    "one_day_workshop": "One-day Workshop",
}


class Settings(BaseSettings):
    """
    All config comes from the environment or the .env file.
    Complex values (EVENT_CATEGORIES) are given as JSON.
    """

    # ── Database ──────────────────────────────────────────
    DATABASE_URL: str                     # async driver: used by FastAPI
    DATABASE_SYNC_URL: str | None = None  # sync driver: used only by Alembic

    # ── JWT ───────────────────────────────────────────────
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # ── CORS ──────────────────────────────────────────────
    ALLOWED_ORIGINS: str = "http://localhost:5173"

    # ── App ───────────────────────────────────────────────
    APP_ENV: str = "production"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Dates are stored as epoch seconds; this zone decides where a day starts.
    SITE_TIMEZONE: str = "UTC"

    # key -> human readable label, in display order
    EVENT_CATEGORIES: dict[str, str] = dict(DEFAULT_EVENT_CATEGORIES)

    # ── Mail (Brevo / Sendinblue) ─────────────────────────
    SENDINBLUE_API_KEY: str = ""
    EMAIL_FROM: str = "events@example.org"
    EMAIL_FROM_NAME: str = "Event Planner"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def origins_list(self) -> list[str]:
        """Splits comma-separated ALLOWED_ORIGINS into a list."""
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def site_tz(self) -> ZoneInfo:
        return ZoneInfo(self.SITE_TIMEZONE)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# Single instance used across the entire app
settings = get_settings()
