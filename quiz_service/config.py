# quiz_service/config.py
import os
from typing import List, Literal, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, Field

SERVICE_NAME = "Fen Bilimleri Quiz API"
SERVICE_VERSION = "1.0.0"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    """Process configuration, built once at startup and handed to the app factory."""

    port: int = 3001
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout_seconds: float = Field(default=60.0, gt=0)
    environment: str = "production"
    log_level: LogLevel = "INFO"
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ=None, env_file: str = ".env") -> "Settings":
        """Read settings from ``environ``, or from the process environment plus ``env_file``.

        Process variables win over the file; the file is only consulted when
        ``environ`` is not given.
        """
        if environ is None:
            file_values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
            env = {**file_values, **os.environ}
        else:
            env = environ
        values = {
            "port": env.get("PORT", 3001),
            "gemini_api_key": env.get("GEMINI_API_KEY") or None,
            "gemini_model": env.get("GEMINI_MODEL_NAME", "gemini-1.5-flash"),
            "gemini_base_url": env.get(
                "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
            ),
            "request_timeout_seconds": env.get("MODEL_TIMEOUT_SECONDS", 60),
            # NODE_ENV kept as a fallback so existing deployments keep their mode
            "environment": (env.get("APP_ENV") or env.get("NODE_ENV") or "production").lower(),
            "log_level": env.get("LOG_LEVEL", "INFO").upper(),
            "cors_allow_origins": _split_csv(env.get("CORS_ALLOW_ORIGINS", "*")) or ["*"],
        }
        return cls.model_validate(values)

    @property
    def expose_error_details(self) -> bool:
        return self.environment == "development"
