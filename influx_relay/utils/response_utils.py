# Copyright 2025 Loopper-AI
# HTTP response utilities for API Gateway

from __future__ import annotations

from typing import Any


def create_response(status_code: int, body: str) -> dict[str, Any]:
    """
    Create a plain-text API Gateway response.

    Args:
        status_code: HTTP status code
        body: Human-readable message

    Returns:
        API Gateway response dictionary
    """
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "text/plain",
        },
        "body": body,
    }
