from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

API_BASE_VAR = "FLODESK_API_BASE"
TIMEOUT_VAR = "FLODESK_TIMEOUT_SECONDS"
USER_AGENT_VAR = "FLODESK_USER_AGENT"

DEFAULT_API_BASE = "https://api.flodesk.com/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "AutoresponderCore/1.0"


class FlodeskConfig(BaseModel):
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("api_base must not be empty")
        return v


def load_config(environ: Mapping[str, str] | None = None) -> FlodeskConfig:
    """Build the adapter configuration from environment variables.

    Unset or blank variables fall back to the defaults. Invalid values raise
    ValueError so a misconfigured host fails at startup.
    """
    env = os.environ if environ is None else environ
    values: dict[str, object] = {}

    api_base = env.get(API_BASE_VAR, "").strip()
    if api_base:
        values["api_base"] = api_base

    raw_timeout = env.get(TIMEOUT_VAR, "").strip()
    if raw_timeout:
        try:
            values["timeout_seconds"] = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f"{TIMEOUT_VAR} must be a number") from e

    user_agent = env.get(USER_AGENT_VAR, "").strip()
    if user_agent:
        values["user_agent"] = user_agent

    try:
        return FlodeskConfig(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid Flodesk configuration: {e}") from e
