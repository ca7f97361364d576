from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from autoresponder_core.contracts.models import ServiceResult, SubscribeSettings
from autoresponder_core.errors import (
    AutoresponderError,
    TransportError,
    UpstreamError,
    ValidationError,
)

ServiceId = str

__all__ = [
    "AutoresponderAdapter",
    "AutoresponderError",
    "ServiceId",
    "TransportError",
    "UpstreamError",
    "ValidationError",
]


class AutoresponderAdapter(Protocol):
    name: str

    def service_id(self) -> ServiceId:
        """Return the registry key for this service."""

    def connect(self, fields: Mapping[str, Any]) -> ServiceResult:
        """Validate credentials and return the account data to persist."""

    def list_segments(self, account_data: Mapping[str, Any]) -> ServiceResult:
        """Fetch the selectable segments for a connected account."""

    def subscribe(
        self,
        settings: SubscribeSettings,
        email: str,
        display_name: str | None = None,
    ) -> ServiceResult:
        """Subscribe a contact to the segment saved in settings."""
