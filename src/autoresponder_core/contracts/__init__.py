from __future__ import annotations

from .models import (
    RenderResult,
    Segment,
    ServiceInfo,
    ServiceResult,
    SubscribeRequest,
    SubscribeSettings,
)

__all__ = [
    "RenderResult",
    "Segment",
    "ServiceInfo",
    "ServiceResult",
    "SubscribeRequest",
    "SubscribeSettings",
]
