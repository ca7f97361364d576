"""HTTP transport used by the service adapters.

The adapters only need a blocking request/response exchange, so the default
transport is a thin wrapper over ``urllib.request``. Tests substitute any
object with a matching ``request`` method.
"""

from __future__ import annotations

import json
import logging
import socket
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Protocol

from autoresponder_core.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status: int
    body: str = ""

    def json(self) -> Any:
        """Decoded JSON body, or None when the body is empty or not JSON."""
        if not self.body:
            return None
        try:
            return json.loads(self.body)
        except json.JSONDecodeError:
            return None


class Transport(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: dict[str, Any] | None = None,
    ) -> HttpResponse:
        """Perform one exchange or raise TransportError."""


class UrllibTransport:
    def __init__(self, timeout: float = 10) -> None:
        self.timeout = timeout

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: dict[str, Any] | None = None,
    ) -> HttpResponse:
        data = json.dumps(body).encode("utf-8") if body is not None else None
        req = urllib.request.Request(url, data=data, headers=headers, method=method)

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                return HttpResponse(
                    status=response.status, body=_decode(response.read())
                )
        except urllib.error.HTTPError as e:
            # A status code is an answer, not a transport failure.
            return HttpResponse(status=e.code, body=_error_body(e))
        except urllib.error.URLError as e:
            if isinstance(e.reason, (socket.timeout, TimeoutError)):
                logger.warning(f"{method} {url} timed out")
                raise TransportError("request timed out", detail={"url": url}) from e
            logger.warning(f"{method} {url} failed: {e.reason}")
            raise TransportError(
                f"connection failed: {e.reason}", detail={"url": url}
            ) from e
        except (TimeoutError, OSError) as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(
                f"connection failed: {e}", detail={"url": url}
            ) from e


def _error_body(error: urllib.error.HTTPError) -> str:
    try:
        return _decode(error.read())
    except (AttributeError, OSError):
        return ""


def _decode(raw: bytes | None) -> str:
    if not raw:
        return ""
    return raw.decode("utf-8", errors="replace")
