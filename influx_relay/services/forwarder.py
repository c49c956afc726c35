# Copyright 2025 Loopper-AI
# Forwarder: validate caller request → InfluxDB write → map result

from __future__ import annotations

import logging
from typing import Any

from ..clients import InfluxClient
from ..config import Config
from ..models import InboundRequest, UpstreamResponse
from ..utils import create_response

logger = logging.getLogger(__name__)

# InfluxDB answers a successful write with 204 No Content; devices expect 200.
INFLUX_WRITE_ACCEPTED = 204


class Forwarder:
    """Relays one line-protocol payload to InfluxDB per call. Holds no per-request state."""

    def __init__(self, config: Config, client: InfluxClient | None = None):
        self.config = config
        self._client = client or InfluxClient(timeout=config.request_timeout)

    def handle(self, request: InboundRequest) -> dict[str, Any]:
        if request.method != "POST":
            logger.info("Rejected: method=%s", request.method)
            return create_response(405, "Method Not Allowed")

        payload = request.raw_body
        if not payload:
            logger.info("Rejected: empty payload")
            return create_response(400, "Missing data payload.")

        result = self._client.write(self.config.influx_url, self.config.influx_token, payload)
        return self._map_result(result)

    @staticmethod
    def _map_result(result: UpstreamResponse) -> dict[str, Any]:
        if result.failed:
            logger.error("Forward failed: error=%s", result.error)
            return create_response(500, f"Internal server error during fetch: {result.error}")

        if result.status_code == INFLUX_WRITE_ACCEPTED:
            logger.info("Forward success: status=%s", result.status_code)
            return create_response(200, "Data received and forwarded successfully.")

        logger.warning("InfluxDB rejected write: status=%s", result.status_code)
        return create_response(
            result.status_code,
            f"InfluxDB Error ({result.status_code}): {result.body_text}",
        )
