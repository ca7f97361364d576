from __future__ import annotations

from typing import Any

import pytest

from autoresponder_core.accounts import InMemoryAccountStore
from autoresponder_core.adapters.flodesk import FlodeskAdapter
from autoresponder_core.config import FlodeskConfig
from autoresponder_core.transport import HttpResponse


class FakeTransport:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self) -> None:
        self.responses: list[HttpResponse | Exception] = []
        self.calls: list[dict[str, Any]] = []

    def queue(self, *responses: HttpResponse | Exception) -> None:
        self.responses.extend(responses)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: dict[str, Any] | None = None,
    ) -> HttpResponse:
        self.calls.append(
            {"method": method, "url": url, "headers": headers, "body": body}
        )
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def methods(self) -> list[str]:
        return [call["method"] for call in self.calls]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def accounts():
    return InMemoryAccountStore({"main": {"api_key": "fd_key_1234"}})


@pytest.fixture
def adapter(accounts, transport):
    config = FlodeskConfig(api_base="https://api.flodesk.test/v1", user_agent="Test/1.0")
    return FlodeskAdapter(accounts, config=config, transport=transport)
