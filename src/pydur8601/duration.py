"""Nanosecond-resolution signed duration value type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from pydur8601._constants import (
    DAYS_PER_WEEK,
    MAX_WHOLE_SECONDS,
    MIN_WHOLE_SECONDS,
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_MILLISECOND,
    NANOSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from pydur8601._utils import trunc_divmod

_MIN_NANOSECONDS = MIN_WHOLE_SECONDS * NANOSECONDS_PER_SECOND - (NANOSECONDS_PER_SECOND - 1)
_MAX_NANOSECONDS = MAX_WHOLE_SECONDS * NANOSECONDS_PER_SECOND + (NANOSECONDS_PER_SECOND - 1)


@dataclass(frozen=True, order=True)
class Duration:
    """A signed span of elapsed time with nanosecond resolution.

    The value is held as a single integer nanosecond count and exposed as
    ``whole_seconds`` (truncated toward zero) plus ``subsec_nanoseconds``.
    Both accessors always carry the same sign.

    Raises:
        OverflowError: If the whole-seconds part does not fit a signed
            64-bit integer.
    """

    total_nanoseconds: int = 0

    ZERO: ClassVar[Duration]
    MIN: ClassVar[Duration]
    MAX: ClassVar[Duration]

    def __post_init__(self) -> None:
        if not isinstance(self.total_nanoseconds, int) or isinstance(self.total_nanoseconds, bool):
            raise TypeError(
                f"total_nanoseconds must be an int, not {type(self.total_nanoseconds).__name__}"
            )
        if not _MIN_NANOSECONDS <= self.total_nanoseconds <= _MAX_NANOSECONDS:
            raise OverflowError(
                f"duration of {self.total_nanoseconds} nanoseconds is out of range"
            )

    # --- Constructors ---

    @classmethod
    def new(cls, seconds: int, nanoseconds: int) -> Duration:
        """Build a duration from whole seconds and a nanosecond adjustment.

        The nanoseconds may exceed one second or carry the opposite sign;
        the result is normalized.
        """
        return cls(seconds * NANOSECONDS_PER_SECOND + nanoseconds)

    @classmethod
    def weeks(cls, weeks: int) -> Duration:
        return cls.seconds(weeks * DAYS_PER_WEEK * SECONDS_PER_DAY)

    @classmethod
    def days(cls, days: int) -> Duration:
        return cls.seconds(days * SECONDS_PER_DAY)

    @classmethod
    def hours(cls, hours: int) -> Duration:
        return cls.seconds(hours * SECONDS_PER_HOUR)

    @classmethod
    def minutes(cls, minutes: int) -> Duration:
        return cls.seconds(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def seconds(cls, seconds: int) -> Duration:
        return cls(seconds * NANOSECONDS_PER_SECOND)

    @classmethod
    def milliseconds(cls, milliseconds: int) -> Duration:
        return cls(milliseconds * NANOSECONDS_PER_MILLISECOND)

    @classmethod
    def microseconds(cls, microseconds: int) -> Duration:
        return cls(microseconds * NANOSECONDS_PER_MICROSECOND)

    @classmethod
    def nanoseconds(cls, nanoseconds: int) -> Duration:
        return cls(nanoseconds)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        """Convert a ``datetime.timedelta`` exactly (microsecond resolution)."""
        micros = (td.days * SECONDS_PER_DAY + td.seconds) * 1_000_000 + td.microseconds
        return cls(micros * NANOSECONDS_PER_MICROSECOND)

    # --- Accessors ---

    @property
    def whole_seconds(self) -> int:
        return trunc_divmod(self.total_nanoseconds, NANOSECONDS_PER_SECOND)[0]

    @property
    def subsec_nanoseconds(self) -> int:
        return trunc_divmod(self.total_nanoseconds, NANOSECONDS_PER_SECOND)[1]

    @property
    def is_negative(self) -> bool:
        return self.total_nanoseconds < 0

    @property
    def is_zero(self) -> bool:
        return self.total_nanoseconds == 0

    def total_seconds(self) -> float:
        return self.total_nanoseconds / NANOSECONDS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        """Convert to ``datetime.timedelta``, truncating below one microsecond."""
        micros = trunc_divmod(self.total_nanoseconds, NANOSECONDS_PER_MICROSECOND)[0]
        return timedelta(microseconds=micros)

    # --- Arithmetic ---

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.total_nanoseconds + other.total_nanoseconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.total_nanoseconds - other.total_nanoseconds)

    def __neg__(self) -> Duration:
        return Duration(-self.total_nanoseconds)

    def __abs__(self) -> Duration:
        return Duration(abs(self.total_nanoseconds))

    def __bool__(self) -> bool:
        return self.total_nanoseconds != 0

    def __repr__(self) -> str:
        return (
            f"Duration(seconds={self.whole_seconds}, "
            f"nanoseconds={self.subsec_nanoseconds})"
        )


Duration.ZERO = Duration(0)
Duration.MIN = Duration(_MIN_NANOSECONDS)
Duration.MAX = Duration(_MAX_NANOSECONDS)
