"""Conversion between Duration values and ISO 8601 component records."""

from __future__ import annotations

import logging
import math

from pydur8601._constants import (
    DEFAULT_MAX_DURATION_LENGTH,
    NANOSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from pydur8601._errors import (
    ERR_MSG_CALENDAR_UNITS,
    ERR_MSG_DURATION_TOO_LONG,
    ERR_MSG_OUT_OF_RANGE,
    CalendarUnitError,
    DurationCodecError,
    DurationRangeError,
    InvalidDurationError,
)
from pydur8601._grammar import format_components, parse_components
from pydur8601._utils import fract, trunc_divmod
from pydur8601.components import ComponentRecord, Precision
from pydur8601.duration import Duration

logger = logging.getLogger(__name__)


def encode_components(
    duration: Duration, precision: Precision | str = Precision.SINGLE
) -> ComponentRecord:
    """Split a duration into days, hours, minutes and fractional seconds.

    Each step divides with truncation toward zero, so a negative duration
    yields non-positive components throughout. Years and months are always
    zero.
    """
    precision = Precision(precision)
    narrow = precision.narrow

    remaining = duration.whole_seconds
    days, remaining = trunc_divmod(remaining, SECONDS_PER_DAY)
    hours, remaining = trunc_divmod(remaining, SECONDS_PER_HOUR)
    minutes, remaining = trunc_divmod(remaining, SECONDS_PER_MINUTE)

    seconds = narrow(
        narrow(float(remaining))
        + narrow(duration.subsec_nanoseconds / NANOSECONDS_PER_SECOND)
    )

    return ComponentRecord(
        years=0.0,
        months=0.0,
        days=narrow(float(days)),
        hours=narrow(float(hours)),
        minutes=narrow(float(minutes)),
        seconds=seconds,
    )


def decode_components(
    record: ComponentRecord, precision: Precision | str = Precision.SINGLE
) -> Duration:
    """Rebuild a duration from a component record.

    Fractional parts of every unit are carried down into seconds and the
    leftover fraction becomes the nanosecond remainder.

    Raises:
        CalendarUnitError: If years or months is non-zero.
        DurationRangeError: If a component is not finite or the result does
            not fit a Duration.
    """
    precision = Precision(precision)
    narrow = precision.narrow
    record = record.narrowed(precision)

    if record.has_calendar_units:
        raise CalendarUnitError(
            ERR_MSG_CALENDAR_UNITS,
            f"duration has years={record.years} months={record.months}",
        )
    if not all(math.isfinite(v) for v in record.astuple()):
        raise DurationRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"non-finite duration component in {record!r}",
        )

    seconds_fract = narrow(fract(record.days) * SECONDS_PER_DAY)
    seconds_fract = narrow(seconds_fract + narrow(fract(record.hours) * SECONDS_PER_HOUR))
    seconds_fract = narrow(seconds_fract + narrow(fract(record.minutes) * SECONDS_PER_MINUTE))
    seconds_fract = narrow(seconds_fract + fract(record.seconds))

    seconds = (
        math.trunc(record.days) * SECONDS_PER_DAY
        + math.trunc(record.hours) * SECONDS_PER_HOUR
        + math.trunc(record.minutes) * SECONDS_PER_MINUTE
        + math.trunc(record.seconds)
        + math.trunc(seconds_fract)
    )

    remainder = narrow(fract(seconds_fract) * NANOSECONDS_PER_SECOND)
    if precision is Precision.SINGLE:
        nanoseconds = math.trunc(remainder)
    else:
        nanoseconds = round(remainder)

    try:
        return Duration.new(seconds, nanoseconds)
    except OverflowError as e:
        raise DurationRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{seconds} seconds does not fit a duration",
            wrapped=e,
        ) from e


def encode(duration: Duration, *, precision: Precision | str = Precision.SINGLE) -> str:
    """Encode a duration as an ISO 8601 duration string.

    Args:
        duration: The duration to encode.
        precision: Floating-point width of the printed components.
            Defaults to single precision.

    Returns:
        The ISO 8601 string, e.g. ``"P2DT3H30M15S"``.
    """
    precision = Precision(precision)
    return format_components(encode_components(duration, precision), precision)


def decode(
    text: str,
    *,
    precision: Precision | str = Precision.SINGLE,
    max_length: int | None = None,
) -> Duration:
    """Decode an ISO 8601 duration string.

    Whole-second counts near +/-2**63 are limited by float64 resolution, so
    such text may round past the Duration range under double precision.

    Args:
        text: The ISO 8601 duration string, e.g. ``"P1DT12H30M45S"``.
        precision: Floating-point width used while carrying fractions.
            Defaults to single precision.
        max_length: Maximum accepted input length. Defaults to 256.

    Returns:
        The decoded Duration.

    Raises:
        InvalidDurationError: If the text is too long or malformed.
        CalendarUnitError: If the text carries years or months.
        DurationRangeError: If the value does not fit a Duration.
    """
    limit = DEFAULT_MAX_DURATION_LENGTH if max_length is None else max_length
    try:
        if len(text) > limit:
            raise InvalidDurationError(
                ERR_MSG_DURATION_TOO_LONG,
                f"duration string length {len(text)} exceeds limit {limit}",
            )
        return decode_components(parse_components(text), precision)
    except DurationCodecError as e:
        logger.debug("rejected duration %.64r: %s", text, e.internal())
        raise
