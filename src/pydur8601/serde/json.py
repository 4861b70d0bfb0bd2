"""Standard library ``json`` integration."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from pydur8601._codec import decode, encode
from pydur8601.components import Precision
from pydur8601.duration import Duration

__all__ = ["DurationJSONEncoder", "duration_object_hook"]


class DurationJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Duration values as ISO 8601 strings.

    Subclass and override ``precision`` to print double-precision components.
    """

    precision: Precision = Precision.SINGLE

    def default(self, o: Any) -> Any:
        if isinstance(o, Duration):
            return encode(o, precision=self.precision)
        return super().default(o)


def duration_object_hook(
    *fields: str,
    precision: Precision | str = Precision.SINGLE,
    max_length: int | None = None,
) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Build a ``json.loads`` object hook that decodes the named keys.

    String values under any of ``fields`` are decoded into Duration values;
    other keys and non-string values are left untouched. Decoding errors
    propagate out of ``json.loads``.

    Example:
        >>> json.loads('{"timeout": "PT30M"}', object_hook=duration_object_hook("timeout"))
        {'timeout': Duration(seconds=1800, nanoseconds=0)}
    """
    names = frozenset(fields)

    def hook(obj: dict[str, Any]) -> dict[str, Any]:
        for key in names & obj.keys():
            value = obj[key]
            if isinstance(value, str):
                obj[key] = decode(value, precision=precision, max_length=max_length)
        return obj

    return hook
