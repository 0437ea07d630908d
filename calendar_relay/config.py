from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import pytz
from dotenv import load_dotenv

from calendar_relay.errors import ConfigurationError


load_dotenv()


@dataclass(frozen=True)
class Settings:
    downstream_function: str
    client_secret_parameter: str
    token_parameter: str
    interval_minutes: int

    aws_region: str
    google_calendar_id: str
    display_tz: Optional[str]
    auth_code: Optional[str]
    log_level: str
    xray_tracing: bool

    @staticmethod
    def _strip_env(key: str, default: str | None = None) -> str | None:
        """Get env var and strip whitespace/newlines (common issue with pasted secrets)."""
        val = os.getenv(key)
        if val is None:
            return default
        stripped = val.strip()
        return stripped if stripped else default

    @staticmethod
    def _require(key: str) -> str:
        val = Settings._strip_env(key)
        if not val:
            raise ConfigurationError(f"{key} environment variable is required")
        return val

    @staticmethod
    def load() -> "Settings":
        downstream_function = Settings._require("arntrello")
        client_secret_parameter = Settings._require("cspointer")
        token_parameter = Settings._require("tokenpointer")

        interval_str = Settings._require("interval")
        try:
            interval_minutes = int(interval_str)
        except ValueError:
            raise ConfigurationError(f"interval must be a whole number of minutes, got {interval_str!r}") from None
        if interval_minutes <= 0:
            raise ConfigurationError(f"interval must be positive, got {interval_minutes}")

        aws_region = Settings._strip_env("AWS_REGION") or "us-west-2"
        google_calendar_id = Settings._strip_env("GOOGLE_CALENDAR_ID") or "primary"

        display_tz = Settings._strip_env("DISPLAY_TZ")
        if display_tz and display_tz not in pytz.all_timezones_set:
            raise ConfigurationError(f"DISPLAY_TZ {display_tz!r} is not a known timezone")

        auth_code = Settings._strip_env("GOOGLE_AUTH_CODE")
        log_level = (Settings._strip_env("LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"LOG_LEVEL {log_level!r} is not a logging level")

        # Traced by default only inside Lambda, where the runtime provides the segment
        in_lambda = bool(Settings._strip_env("AWS_LAMBDA_FUNCTION_NAME"))
        xray_tracing = (Settings._strip_env("XRAY_TRACING") or ("true" if in_lambda else "false")).lower() in {"1", "true", "yes"}

        return Settings(
            downstream_function=downstream_function,
            client_secret_parameter=client_secret_parameter,
            token_parameter=token_parameter,
            interval_minutes=interval_minutes,
            aws_region=aws_region,
            google_calendar_id=google_calendar_id,
            display_tz=display_tz,
            auth_code=auth_code,
            log_level=log_level,
            xray_tracing=xray_tracing,
        )
