"""Host serialization framework integrations.

The pydantic integration is imported lazily so the core codec works
without pydantic installed.
"""

from __future__ import annotations

from typing import Any

from pydur8601.serde.json import DurationJSONEncoder, duration_object_hook

__all__ = [
    "DurationJSONEncoder",
    "IsoDuration",
    "IsoDurationCodec",
    "IsoTimedelta",
    "duration_object_hook",
]


def __getattr__(name: str) -> Any:
    """Lazy re-exports of the pydantic integration."""
    if name in ("IsoDurationCodec", "IsoDuration", "IsoTimedelta"):
        from pydur8601.serde import pydantic

        return getattr(pydantic, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
