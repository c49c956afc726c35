# Copyright 2025 Loopper-AI
# AWS Secrets Manager client

from __future__ import annotations

import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class SecretsClient:
    """Client for AWS Secrets Manager operations."""

    def __init__(self):
        self._client = boto3.client("secretsmanager")

    def get_influx_token(self, secret_arn: str) -> str | None:
        """
        Retrieve the InfluxDB API token from Secrets Manager.

        The secret may hold the bare token or a JSON object with an
        INFLUX_TOKEN key.

        Args:
            secret_arn: ARN of the secret containing the token

        Returns:
            Token string or None if retrieval fails
        """
        try:
            response = self._client.get_secret_value(SecretId=secret_arn)
            secret_string = (response.get("SecretString") or "").strip()

            if secret_string.startswith("{"):
                token = json.loads(secret_string).get("INFLUX_TOKEN")
                if not isinstance(token, str):
                    logger.error("INFLUX_TOKEN in secret is not a string")
                    return None
                secret_string = token.strip()

            if not secret_string:
                logger.error("Missing InfluxDB token in secret")
                return None

            return secret_string

        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to retrieve secret %s: %s", secret_arn, e)
            return None
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in secret %s: %s", secret_arn, e)
            return None
        except Exception as e:
            logger.exception("Unexpected error retrieving secret: %s", e)
            return None
