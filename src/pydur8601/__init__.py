"""pydur8601 - ISO 8601 duration codec for serialization frameworks."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydur8601")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pydur8601._codec import decode, decode_components, encode, encode_components
from pydur8601._errors import (
    CalendarUnitError,
    DurationCodecError,
    DurationRangeError,
    InvalidDurationError,
)
from pydur8601._grammar import format_components, parse_components
from pydur8601.components import ComponentRecord, Precision
from pydur8601.duration import Duration

__all__ = [
    "decode",
    "decode_components",
    "encode",
    "encode_components",
    "format_components",
    "parse_components",
    "ComponentRecord",
    "Duration",
    "Precision",
    "CalendarUnitError",
    "DurationCodecError",
    "DurationRangeError",
    "InvalidDurationError",
]
