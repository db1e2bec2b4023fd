import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv(override=True)

DEFAULT_GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
)

# Only the names are ever reported, never the values
SECRET_VARS = ("GOOGLE_API_KEY", "SUPABASE_URL", "SUPABASE_KEY")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


class Settings:
    """Process-wide configuration, read once and handed to the relay explicitly.

    Keyword arguments override the environment, which is how tests inject
    deterministic values.
    """

    def __init__(
        self,
        google_api_key: Optional[str] = None,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        supabase_table_name: Optional[str] = None,
        gemini_url: Optional[str] = None,
        frontend_origin: Optional[str] = None,
        app_env: Optional[str] = None,
        timeout: Optional[float] = None,
        log_level: Optional[str] = None,
    ):
        self.GOOGLE_API_KEY: str = (
            google_api_key
            if google_api_key is not None
            else os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY", "")
        )
        self.SUPABASE_URL: str = (
            supabase_url if supabase_url is not None else os.getenv("SUPABASE_URL", "")
        )
        self.SUPABASE_KEY: str = (
            supabase_key if supabase_key is not None else os.getenv("SUPABASE_KEY", "")
        )
        self.SUPABASE_TABLE_NAME: str = supabase_table_name or os.getenv(
            "SUPABASE_TABLE_NAME", "userData"
        )
        self.GEMINI_URL: str = gemini_url or os.getenv("GEMINI_URL", DEFAULT_GEMINI_URL)
        self.FRONTEND_ORIGIN: str = frontend_origin or os.getenv(
            "FRONTEND_ORIGIN", "http://localhost:3000"
        )
        self.APP_ENV: str = (app_env or os.getenv("APP_ENV", "production")).strip().lower()
        self.RELAY_TIMEOUT_SECONDS: float = (
            timeout if timeout is not None else _env_float("RELAY_TIMEOUT_SECONDS", 30.0)
        )
        self.LOG_LEVEL: str = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    def missing_secrets(self) -> List[str]:
        return [name for name in SECRET_VARS if not getattr(self, name)]

    def __repr__(self) -> str:
        # Secrets stay out of logs and tracebacks
        return (
            f"Settings(table={self.SUPABASE_TABLE_NAME!r}, origin={self.FRONTEND_ORIGIN!r}, "
            f"env={self.APP_ENV!r}, missing={self.missing_secrets()!r})"
        )


settings = Settings()
