# Copyright 2025 Loopper-AI
# Service modules

from .forwarder import Forwarder

__all__ = ["Forwarder"]
