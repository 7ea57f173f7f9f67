"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here. Settings are read once
at process start; there is no hot-reload.
"""
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: remotejobs/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True ensures .env
# values override any shell env.
# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "RemoteJobs"
    app_version: str = "1.0.0"
    environment: str = "production"
    port: int = 5000

    # Database
    database_url: str = "sqlite:///./remotejobs.db"

    # Auth
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    bcrypt_rounds: int = 10

    # CORS (comma-separated)
    cors_origins: str = "http://localhost:8081,http://localhost:3000"

    # Upload & storage
    upload_dir: str = "uploads"
    max_resume_bytes: int = 5_000_000
    resume_storage: str = "local"  # "local" or "s3"

    # AWS S3
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = "us-east-1"
    aws_bucket_name: str = "remotejobs-resumes"
    s3_key_prefix: str = "resumes"

    # Redis (jobs feed cache)
    redis_url: str = ""

    # Remote jobs feed
    remote_jobs_api_url: str = "https://remotive.com/api/remote-jobs"
    jobs_cache_ttl: int = 600
    jobs_page_size: int = 10

    # HTTP / network
    http_request_timeout: int = 30

    # Debug
    enable_debug_routes: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, built on first use."""
    return Settings()


# --- Constants (non-env, business config) ---

# Resume upload
ALLOWED_RESUME_EXTENSIONS: tuple[str, ...] = (".pdf", ".doc", ".docx")

# Jobs feed: location filter value -> substrings of candidate_required_location
LOCATION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "us": ("usa", "united states", "us only", "u.s.", "americas", "north america"),
    "europe": ("europe", "emea", "eu", "uk", "united kingdom", "germany", "cet"),
    "worldwide": ("worldwide", "anywhere", "global"),
}

# Jobs feed: datePosted filter value -> max age in days
DATE_POSTED_DAYS: dict[str, int] = {
    "24h": 1,
    "week": 7,
    "month": 30,
}

# Jobs published within this many days are flagged isNew
NEW_JOB_DAYS: int = 7
