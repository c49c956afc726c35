# Copyright 2025 Loopper-AI
# Data models for Lambda-InfluxRelay

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class InboundRequest:
    """Caller request as delivered by API Gateway or a function URL."""

    method: str
    raw_body: str = ""

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> InboundRequest:
        """Build from a proxy event. Supports REST (httpMethod) and HTTP API v2 events."""
        method = event.get("httpMethod")
        if not method:
            http = (event.get("requestContext") or {}).get("http") or {}
            method = http.get("method") or ""

        raw_body = event.get("body") or ""
        if raw_body and event.get("isBase64Encoded"):
            # surrogateescape keeps non-UTF-8 bytes; InfluxClient re-encodes them unchanged
            try:
                raw_body = base64.b64decode(raw_body).decode("utf-8", errors="surrogateescape")
            except binascii.Error:
                logger.warning("isBase64Encoded body is not base64; forwarding as received")

        return cls(method=method, raw_body=raw_body)


@dataclass
class UpstreamResponse:
    """Result of the InfluxDB write call."""

    status_code: int | None = None
    body_text: str = ""
    error: str | None = None

    @property
    def failed(self) -> bool:
        """True when the call never produced an HTTP response."""
        return self.error is not None
