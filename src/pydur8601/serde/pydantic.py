"""Pydantic field integration.

Attach :class:`IsoDurationCodec` to a ``Duration`` or ``datetime.timedelta``
field so the model reads and writes it as an ISO 8601 duration string::

    class Job(BaseModel):
        timeout: IsoDuration
        retry_after: Annotated[timedelta, IsoDurationCodec(precision="double")]
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from pydur8601._codec import decode, encode
from pydur8601._errors import ERR_MSG_OUT_OF_RANGE, DurationCodecError
from pydur8601.components import Precision
from pydur8601.duration import Duration

__all__ = ["IsoDurationCodec", "IsoDuration", "IsoTimedelta"]


@dataclass(frozen=True)
class IsoDurationCodec:
    """Annotation that validates and serializes a field as ISO 8601 text.

    Validation accepts ISO 8601 strings, ``Duration`` and ``timedelta``
    instances. Serialization always produces the string form.
    """

    precision: Precision | str = Precision.SINGLE
    max_length: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "precision", Precision(self.precision))

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if source_type is Duration:
            validate = self._validate_duration
        elif source_type is timedelta:
            validate = self._validate_timedelta
        else:
            raise TypeError(
                f"IsoDurationCodec supports Duration and timedelta fields, not {source_type!r}"
            )
        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self._serialize,
                info_arg=False,
                return_schema=core_schema.str_schema(),
            ),
        )

    def __get_pydantic_json_schema__(
        self, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(core_schema.str_schema())
        json_schema["format"] = "duration"
        return json_schema

    def _decode(self, text: str) -> Duration:
        try:
            return decode(text, precision=self.precision, max_length=self.max_length)
        except DurationCodecError as e:
            raise PydanticCustomError(
                "iso_duration",
                "Invalid ISO 8601 duration: {reason}",
                {"reason": e.user_message},
            ) from e

    def _validate_duration(self, value: Any) -> Duration:
        if isinstance(value, Duration):
            return value
        if isinstance(value, timedelta):
            return Duration.from_timedelta(value)
        if isinstance(value, str):
            return self._decode(value)
        raise PydanticCustomError(
            "iso_duration_type",
            "Input should be an ISO 8601 duration string",
        )

    def _validate_timedelta(self, value: Any) -> timedelta:
        if isinstance(value, timedelta):
            return value
        duration = self._validate_duration(value)
        try:
            return duration.to_timedelta()
        except OverflowError as e:
            raise PydanticCustomError(
                "iso_duration",
                "Invalid ISO 8601 duration: {reason}",
                {"reason": ERR_MSG_OUT_OF_RANGE},
            ) from e

    def _serialize(self, value: Duration | timedelta) -> str:
        if isinstance(value, timedelta):
            value = Duration.from_timedelta(value)
        return encode(value, precision=self.precision)


IsoDuration = Annotated[Duration, IsoDurationCodec()]
"""A ``Duration`` field carried as an ISO 8601 string."""

IsoTimedelta = Annotated[timedelta, IsoDurationCodec()]
"""A ``timedelta`` field carried as an ISO 8601 string."""
