# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Park Fleet Verification API"

    # ── Storage ───────────────────────────────────────────────────────────
    STORAGE_BACKEND: str = "memory"              # memory | sql
    DATABASE_URL: str = "sqlite:///./park.db"    # only used by the sql backend
    SEED_DATA: bool = True

    # ── Default admin (created by the seeder) ─────────────────────────────
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: str = "admin123"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 5000
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # ── Security ──────────────────────────────────────────────────────────
    JWT_SECRET: str = "park-management-system-secret"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_TTL_SECONDS: int = 24 * 60 * 60
    SESSION_TTL_SECONDS: int = 24 * 60 * 60
    SESSION_CHECK_PERIOD_SECONDS: int = 24 * 60 * 60   # prune expired sessions
    SESSION_COOKIE_NAME: str = "park.sid"
    COOKIE_SECURE: bool = False                  # True behind HTTPS in production
    BCRYPT_ROUNDS: int = 10

    # ── Feedback ──────────────────────────────────────────────────────────
    # Feedback types counted as open issues on the dashboard
    ISSUE_FEEDBACK_TYPES: list[str] = ["complaint", "report"]

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
