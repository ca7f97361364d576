from __future__ import annotations


class AutoresponderError(Exception):
    code = "autoresponder_error"

    def __init__(self, message: str, *, detail: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(AutoresponderError):
    """Missing or empty required input, raised before any network call."""

    code = "validation_error"


class TransportError(AutoresponderError):
    """Network-level failure: DNS, refused connection, timeout."""

    code = "transport_error"


class UpstreamError(AutoresponderError):
    """Non-200 status or an unparseable body from the vendor."""

    code = "upstream_error"


class RegistryError(Exception):
    def __init__(self, *, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
