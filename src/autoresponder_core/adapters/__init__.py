from __future__ import annotations

from .base import (
    AutoresponderAdapter,
    AutoresponderError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from .flodesk import FlodeskAdapter
from .registry import ServiceRegistry, get_default_registry
from .targets import ALLOWED_SERVICES

__all__ = [
    "ALLOWED_SERVICES",
    "AutoresponderAdapter",
    "AutoresponderError",
    "FlodeskAdapter",
    "ServiceRegistry",
    "TransportError",
    "UpstreamError",
    "ValidationError",
    "get_default_registry",
]
