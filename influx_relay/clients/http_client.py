# Copyright 2025 Loopper-AI
# HTTP client for the InfluxDB write endpoint

from __future__ import annotations

import logging
import ssl
import urllib.error
import urllib.request
from typing import Any

from ..models import UpstreamResponse

logger = logging.getLogger(__name__)


class InfluxClient:
    """HTTP client for posting line protocol to InfluxDB."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self._ssl_ctx = ssl.create_default_context()

    def write(self, url: str, token: str, payload: str) -> UpstreamResponse:
        """POST line protocol verbatim. Returns UpstreamResponse.

        Note: urllib.request.urlopen raises HTTPError for 4xx/5xx, which still
        carries the upstream status and body, so it is mapped like a response.
        Anything else raised while sending is a transport failure.
        """
        kwargs: dict[str, Any] = {"context": self._ssl_ctx}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            # Request() raises ValueError for an empty or malformed URL
            req = urllib.request.Request(
                url,
                data=payload.encode("utf-8", errors="surrogateescape"),
                headers={
                    "Authorization": f"Token {token}",
                    "Content-Type": "text/plain",
                },
                method="POST",
            )
            with urllib.request.urlopen(req, **kwargs) as resp:
                code = resp.getcode()
                body = resp.read().decode("utf-8", errors="replace")
                return UpstreamResponse(status_code=code, body_text=body)

        except urllib.error.HTTPError as exc:
            try:
                err_body = exc.read().decode("utf-8", errors="replace")
            except Exception as read_exc:
                logger.error("HTTPError %s: body read failed: %s", exc.code, read_exc)
                return UpstreamResponse(error=str(read_exc))
            logger.warning("HTTPError: code=%s body=%s", exc.code, err_body[:500])
            return UpstreamResponse(status_code=exc.code, body_text=err_body)

        except urllib.error.URLError as exc:
            logger.error("URLError: reason=%s", exc.reason)
            return UpstreamResponse(error=str(exc.reason))

        except Exception as exc:
            logger.exception("Unexpected HTTP error: %s", exc)
            return UpstreamResponse(error=str(exc))
