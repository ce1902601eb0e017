"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

from doordont.core.constants import APP_ENV_PRODUCTION, APP_ENV_TESTING, STORE_BACKEND_SUPABASE

# Load environment variables
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables"""

    # Operating mode: "production" evaluates weekly, anything else daily
    APP_ENV: str = os.getenv("APP_ENV", APP_ENV_TESTING)

    # Storage
    STORE_BACKEND: str = os.getenv("STORE_BACKEND", STORE_BACKEND_SUPABASE)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")

    # Mail transport
    EMAIL_USER: str = os.getenv("EMAIL_USER", "")
    EMAIL_PASS: str = os.getenv("EMAIL_PASS", "")
    SMTP_HOST: str = os.getenv("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "465"))

    # Evaluation schedule
    SCHEDULER_TIMEZONE: str = os.getenv("SCHEDULER_TIMEZONE", "America/Los_Angeles")
    EVALUATION_DAY_OF_WEEK: str = os.getenv("EVALUATION_DAY_OF_WEEK", "sun")
    EVALUATION_HOUR: int = int(os.getenv("EVALUATION_HOUR", "18"))
    EVALUATION_MINUTE: int = int(os.getenv("EVALUATION_MINUTE", "0"))
    RESET_COUNTER_AFTER_EVALUATION: bool = _as_bool(
        os.getenv("RESET_COUNTER_AFTER_EVALUATION", "false")
    )

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == APP_ENV_PRODUCTION


# Create a global settings instance
settings = Settings()
