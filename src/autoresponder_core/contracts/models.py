from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from autoresponder_core.errors import AutoresponderError


class Segment(BaseModel):
    """A named subscriber grouping returned by the vendor."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    name: str


class SubscribeRequest(BaseModel):
    email: str = Field(..., min_length=1)
    display_name: str | None = None
    segment_id: str

    def subscriber_body(self) -> dict[str, str]:
        """Body of the create/update subscriber call."""
        body: dict[str, str] = {}
        if self.display_name:
            body["first_name"] = self.display_name
        body["email"] = self.email
        return body

    def segments_body(self) -> dict[str, list[str]]:
        return {"segment_ids": [self.segment_id]}


class SubscribeSettings(BaseModel):
    """Saved form settings handed over by the host on submission."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    service_account: str = ""
    segment_id: str = Field(
        "", validation_alias=AliasChoices("segment_id", "list_id")
    )


class ServiceResult(BaseModel):
    """Outcome envelope returned by every adapter operation.

    Attributes:
        ok: Whether the operation succeeded.
        data: Operation payload on success.
        error: Short human-readable message when ``ok`` is False.
        code: Machine-readable error class (``validation_error``,
            ``transport_error`` or ``upstream_error``).
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    data: Any = None
    error: str | None = None
    code: str | None = None

    @classmethod
    def success(cls, data: Any = None) -> ServiceResult:
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, exc: AutoresponderError) -> ServiceResult:
        return cls(ok=False, error=exc.message, code=exc.code)


class ServiceInfo(BaseModel):
    id: str
    type: Literal["autoresponder"] = "autoresponder"
    name: str


class RenderResult(BaseModel):
    error: str | None = None
    html: str = ""
