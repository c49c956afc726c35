# Copyright 2025 Loopper-AI
# Client modules for external services

from .http_client import InfluxClient
from .secrets_client import SecretsClient

__all__ = ["InfluxClient", "SecretsClient"]
