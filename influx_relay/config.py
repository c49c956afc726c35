# Copyright 2025 Loopper-AI
# Configuration management for Lambda-InfluxRelay

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Immutable configuration from environment variables."""

    influx_url: str
    influx_token: str
    influx_secret_arn: str | None = None
    request_timeout: float | None = None
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> Config:
        """Load config. REQUEST_TIMEOUT is optional; unset leaves the client default."""
        timeout = (os.environ.get("REQUEST_TIMEOUT") or "").strip()

        return cls(
            influx_url=(os.environ.get("INFLUX_URL") or "").strip(),
            influx_token=(os.environ.get("INFLUX_TOKEN") or "").strip(),
            influx_secret_arn=os.environ.get("INFLUX_SECRET_ARN") or None,
            request_timeout=float(timeout) if timeout else None,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def needs_secret_lookup(self) -> bool:
        return not self.influx_token and bool(self.influx_secret_arn)

    def validate(self) -> tuple[bool, str | None]:
        if not self.influx_url:
            return False, "INFLUX_URL not configured"
        if not self.influx_token:
            return False, "INFLUX_TOKEN or INFLUX_SECRET_ARN required"
        return True, None
