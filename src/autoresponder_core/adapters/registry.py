from __future__ import annotations

from autoresponder_core.accounts import AccountStore
from autoresponder_core.config import FlodeskConfig
from autoresponder_core.contracts.models import ServiceInfo
from autoresponder_core.errors import RegistryError
from autoresponder_core.transport import Transport

from .base import AutoresponderAdapter
from .targets import ALLOWED_SERVICES


class ServiceRegistry:
    """Service id -> adapter instance, filled once at startup."""

    def __init__(self) -> None:
        self._adapters: dict[str, AutoresponderAdapter] = {}

    def register(self, adapter: AutoresponderAdapter) -> None:
        service_id = adapter.service_id()
        if service_id not in ALLOWED_SERVICES:
            raise RegistryError(
                code="disallowed_service",
                message=f"disallowed_service: service={service_id!r}",
            )
        if service_id in self._adapters:
            raise RegistryError(
                code="duplicate_service",
                message=f"duplicate_service: service={service_id}",
            )
        self._adapters[service_id] = adapter

    def get(self, service_id: str) -> AutoresponderAdapter:
        try:
            return self._adapters[service_id]
        except KeyError:
            raise RegistryError(
                code="unknown_service",
                message=f"unknown_service: service={service_id}",
            ) from None

    def list_services(self) -> list[ServiceInfo]:
        """Registered services in alphabetical order, as the form shows them."""
        return [
            ServiceInfo(id=service_id, name=adapter.name)
            for service_id, adapter in sorted(self._adapters.items())
        ]


def get_default_registry(
    accounts: AccountStore,
    config: FlodeskConfig | None = None,
    transport: Transport | None = None,
) -> ServiceRegistry:
    """Return the registry with every built-in autoresponder service."""
    from .flodesk import FlodeskAdapter

    registry = ServiceRegistry()
    registry.register(FlodeskAdapter(accounts, config=config, transport=transport))
    return registry
