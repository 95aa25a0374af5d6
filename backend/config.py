"""Centralized configuration: all env vars in one place."""

import os

from dotenv import load_dotenv

# Local development: pick up a .env next to the process, real env wins
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")

        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3001"))

        # Upstream credentials
        self.football_api_key: str | None = os.getenv("FOOTBALL_API_KEY")
        self.guardian_api_key: str | None = os.getenv("GUARDIAN_API_KEY")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing upstream credential env vars."""
        required = ["FOOTBALL_API_KEY", "GUARDIAN_API_KEY"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "FOOTBALL_API_KEY": "football_api_key",
        "GUARDIAN_API_KEY": "guardian_api_key",
    }
    return mapping.get(env_var, env_var.lower())
