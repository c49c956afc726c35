# Copyright 2025 Loopper-AI
# Utility modules

from .response_utils import create_response

__all__ = ["create_response"]
