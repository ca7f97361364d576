from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class AccountStore(Protocol):
    """Credential store owned by the host application."""

    def get_account_data(self, account: str) -> dict[str, Any] | None:
        """Return the saved account data, or None when unknown."""


class InMemoryAccountStore:
    def __init__(self, accounts: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._accounts: dict[str, dict[str, Any]] = {
            name: dict(data) for name, data in (accounts or {}).items()
        }

    def save_account(self, account: str, data: Mapping[str, Any]) -> None:
        if not isinstance(account, str) or not account.strip():
            raise ValueError("account name is required")
        self._accounts[account] = dict(data)

    def get_account_data(self, account: str) -> dict[str, Any] | None:
        data = self._accounts.get(account)
        return dict(data) if data is not None else None

    def list_accounts(self) -> list[str]:
        return sorted(self._accounts.keys())
