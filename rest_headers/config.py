"""Header settings loaded from the host environment.

The injectors themselves take plain strings; this module only exists for
hosts that prefer to drive the standard chain from environment variables.
"""

import os
from enum import Enum
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rest_headers.errors import HeaderConfigurationError
from rest_headers.logging import get_logger
from rest_headers.middleware.injectors import (
    cache_control_middleware,
    content_type_middleware,
    cors_origin_middleware,
    frame_middleware,
    hsts_middleware,
)
from rest_headers.ports import Middleware

logger = get_logger("config")

ENV_PREFIX = "REST_HEADERS_"


class Environment(Enum):
    """Host application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class HeaderSettings(BaseModel):
    """Which response headers to inject, and with which values."""

    model_config = ConfigDict(frozen=True)

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Host environment")
    cache_control: bool = Field(default=True, description="Inject Cache-Control: no-store")
    content_type: str | None = Field(default="application/json", description="Content-Type to inject")
    cors_origin: str | None = Field(default=None, description="Access-Control-Allow-Origin to inject")
    frame_protection: bool = Field(default=True, description="Inject frame protection headers")
    hsts: str | None = Field(
        default=None, description="Strict-Transport-Security directive to inject in production"
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HeaderSettings":
        """
        Load settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            HeaderSettings instance

        Raises:
            HeaderConfigurationError: If a variable holds an unusable value
        """
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {}
        if "ENVIRONMENT" in environ:
            values["environment"] = environ["ENVIRONMENT"].lower()

        for name in ("cache_control", "frame_protection"):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = _parse_flag(ENV_PREFIX + name.upper(), raw)

        for name in ("content_type", "cors_origin", "hsts"):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                # Empty string disables the header
                values[name] = raw or None

        try:
            settings = cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or "settings"
            raise HeaderConfigurationError(field, error["msg"]) from e

        logger.info(
            "header_settings_loaded",
            environment=settings.environment.value,
            cache_control=settings.cache_control,
            content_type=settings.content_type,
            cors_origin=settings.cors_origin,
            frame_protection=settings.frame_protection,
            hsts=settings.hsts,
        )
        return settings

    def build_middlewares(self) -> list[Middleware]:
        """
        Build the enabled header middlewares.

        Order: cache control, content type, CORS origin, frame, HSTS.
        HSTS is only added in production, where the API is served over HTTPS.
        """
        middlewares = []
        if self.cache_control:
            middlewares.append(cache_control_middleware())
        if self.content_type is not None:
            middlewares.append(content_type_middleware(self.content_type))
        if self.cors_origin is not None:
            middlewares.append(cors_origin_middleware(self.cors_origin))
        if self.frame_protection:
            middlewares.append(frame_middleware())
        if self.hsts is not None:
            if self.environment == Environment.PRODUCTION:
                middlewares.append(hsts_middleware(self.hsts))
            else:
                logger.info("hsts_skipped", environment=self.environment.value)
        return middlewares


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise HeaderConfigurationError(name, f"expected 'true' or 'false', got {raw!r}")


# Global settings instance
_settings: HeaderSettings | None = None


def get_settings() -> HeaderSettings:
    """Get or load the process-wide header settings."""
    global _settings
    if _settings is None:
        _settings = HeaderSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
