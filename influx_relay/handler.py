# Copyright 2025 Loopper-AI
# Lambda handler: ESP8266 line protocol POST → InfluxDB Cloud write API
#
# 204 from InfluxDB is reported to the device as 200.
# Other upstream statuses are passed through with the InfluxDB error text.
# Every outcome is returned as a response; nothing is raised to the caller.

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from botocore.exceptions import BotoCoreError

from .clients import SecretsClient
from .config import Config
from .models import InboundRequest
from .services import Forwarder

logger = logging.getLogger()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """API Gateway POST → forward raw body to InfluxDB."""
    config = Config.from_environment()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    request_id = getattr(context, "aws_request_id", "") if context else ""
    logger.info("lambda_handler started request_id=%s", request_id)

    config = _resolve_token(config)

    # Missing config is reported but not enforced; the write attempt surfaces it
    is_valid, err = config.validate()
    if not is_valid:
        logger.error("Configuration error: %s", err)

    request = InboundRequest.from_event(event or {})
    response = Forwarder(config).handle(request)

    logger.info("lambda_handler finished status=%s request_id=%s", response["statusCode"], request_id)
    return response


def _resolve_token(config: Config) -> Config:
    """Fill influx_token from Secrets Manager when only INFLUX_SECRET_ARN is set."""
    if not config.needs_secret_lookup:
        return config

    try:
        client = SecretsClient()
    except BotoCoreError as e:
        logger.error("Secrets Manager client unavailable: %s", e)
        return config

    token = client.get_influx_token(config.influx_secret_arn)
    if not token:
        return config
    return dataclasses.replace(config, influx_token=token)
