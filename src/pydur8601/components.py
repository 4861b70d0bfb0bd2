"""ISO 8601 duration component record and numeric precision modes."""

from __future__ import annotations

import enum
from dataclasses import astuple, dataclass

from pydur8601._utils import narrow_f32


class Precision(enum.StrEnum):
    """Floating-point width used for component values.

    SINGLE narrows every intermediate to IEEE-754 binary32 and truncates the
    final nanosecond remainder. DOUBLE keeps Python floats and rounds the
    nanosecond remainder to nearest.
    """

    SINGLE = "single"
    DOUBLE = "double"

    def narrow(self, value: float) -> float:
        if self is Precision.SINGLE:
            return narrow_f32(value)
        return value


@dataclass(frozen=True)
class ComponentRecord:
    """The six numeric fields of an ISO 8601 duration.

    No invariant is enforced: any field may be fractional or negative.
    """

    years: float = 0.0
    months: float = 0.0
    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0

    def astuple(self) -> tuple[float, float, float, float, float, float]:
        return astuple(self)

    def narrowed(self, precision: Precision) -> ComponentRecord:
        """Return a copy with every field rounded to ``precision``."""
        return ComponentRecord(*(precision.narrow(float(v)) for v in self.astuple()))

    def negated(self) -> ComponentRecord:
        return ComponentRecord(*(-v for v in self.astuple()))

    @property
    def has_calendar_units(self) -> bool:
        return self.years != 0 or self.months != 0
