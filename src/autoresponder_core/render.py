"""Form fragments for the autoresponder settings panel.

Rendering only consumes adapter results; it never talks to the vendor
directly, so hosts can swap templates without touching the adapters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from autoresponder_core.adapters.base import AutoresponderAdapter
from autoresponder_core.contracts.models import RenderResult, Segment, SubscribeSettings

TEMPLATE_DIR = Path(__file__).parent / "templates"

API_KEY_LABEL = "API Key"
API_KEY_HELP = "Your API key can be found in your Flodesk account."
SEGMENT_LABEL = "Segment"
PLACEHOLDER_OPTION = ("", "Choose...")

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_connect_settings() -> str:
    """Markup for the API key input shown when connecting an account."""
    template = _env.get_template("connect_settings.html")
    return template.render(label=API_KEY_LABEL, help=API_KEY_HELP)


def render_segment_field(
    segments: Iterable[Segment], selected: str | None = None
) -> str:
    """Markup for the segment dropdown, in the order the vendor returned."""
    options = [PLACEHOLDER_OPTION]
    options.extend((segment.id, segment.name) for segment in segments)
    template = _env.get_template("segment_field.html")
    return template.render(
        label=SEGMENT_LABEL, options=options, selected=selected or ""
    )


def render_fields(
    adapter: AutoresponderAdapter,
    account_data: Mapping[str, Any],
    settings: SubscribeSettings | None = None,
) -> RenderResult:
    result = adapter.list_segments(account_data)
    if not result.ok:
        return RenderResult(error=result.error, html="")

    selected = settings.segment_id if settings is not None else None
    return RenderResult(html=render_segment_field(result.data, selected))
