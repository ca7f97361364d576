from __future__ import annotations

ALLOWED_SERVICES = frozenset({"flodesk"})
