"""Pydantic configuration models for the wellness tracker."""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from mood.dates import get_timezone
from shared_types import TimeRange


def _expand_env(value: Optional[str]) -> Optional[str]:
    """Expand a whole-value ``${VAR}`` reference."""
    if value and value.startswith("${") and value.endswith("}"):
        return os.getenv(value[2:-1], "")
    return value


class SupabaseConfig(BaseModel):
    """Hosted store connection."""

    url: str = ""
    anon_key: Optional[str] = None
    service_role_key: Optional[str] = None
    jwt_secret: Optional[str] = None
    timeout: float = 8.0

    @field_validator("url")
    @classmethod
    def strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be positive, got {v}")
        return v

    @property
    def api_key(self) -> Optional[str]:
        """Key the CLI talks to PostgREST with; service role wins over anon."""
        return self.service_role_key or self.anon_key


class UserConfig(BaseModel):
    """Who the CLI acts as and which calendar they live in."""

    user_id: Optional[str] = None
    timezone: str = "UTC"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        get_timezone(v)
        return v


class AnalyticsConfig(BaseModel):
    """Defaults for mood analytics views."""

    default_range: str = TimeRange.WEEK
    recent_entries: int = Field(10, ge=1)

    @field_validator("default_range")
    @classmethod
    def validate_range(cls, v: str) -> str:
        valid = {str(t) for t in TimeRange}
        if v not in valid:
            raise ValueError(f"Invalid range: {v}. Must be one of {valid}")
        return v


class RetryConfig(BaseModel):
    """Retry/backoff configuration."""

    max_attempts: int = 3
    min_wait: float = 0.5
    max_wait: float = 4.0


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class WellnessConfig(BaseModel):
    """Main configuration model."""

    supabase: SupabaseConfig = Field(default_factory=SupabaseConfig)
    user: UserConfig = Field(default_factory=UserConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} patterns, then fall back to the standard env vars."""
        sb = self.supabase
        sb.anon_key = _expand_env(sb.anon_key)
        sb.service_role_key = _expand_env(sb.service_role_key)
        sb.jwt_secret = _expand_env(sb.jwt_secret)

        sb.url = (_expand_env(sb.url) or os.getenv("SUPABASE_URL", "")).rstrip("/")
        sb.anon_key = sb.anon_key or os.getenv("SUPABASE_ANON_KEY") or None
        sb.service_role_key = sb.service_role_key or os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None
        sb.jwt_secret = sb.jwt_secret or os.getenv("SUPABASE_JWT_SECRET") or None
        self.user.user_id = self.user.user_id or os.getenv("WELLNESS_USER_ID") or None
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "WellnessConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
