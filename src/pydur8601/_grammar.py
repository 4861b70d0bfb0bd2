"""ISO 8601 duration text grammar: parse to and print from ComponentRecord."""

from __future__ import annotations

import math
from decimal import Decimal

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput

from pydur8601._constants import DAYS_PER_WEEK
from pydur8601._errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_OUT_OF_RANGE,
    DurationRangeError,
    InvalidDurationError,
)
from pydur8601._utils import narrow_f32
from pydur8601.components import ComponentRecord, Precision

_GRAMMAR = r"""
duration: SIGN? "P" (weeks | date_part time_part? | time_part)

weeks: NUMBER "W"

date_part: years months? days?
         | months days?
         | days

time_part: "T" (hours minutes? seconds? | minutes seconds? | seconds)

years: NUMBER "Y"
months: NUMBER "M"
days: NUMBER "D"
hours: NUMBER "H"
minutes: NUMBER "M"
seconds: NUMBER "S"

SIGN: "+" | "-"
NUMBER: /[+-]?[0-9]+([.,][0-9]+)?/
"""

# Printed designators, in ISO 8601 order
_DATE_DESIGNATORS = (("years", "Y"), ("months", "M"), ("days", "D"))
_TIME_DESIGNATORS = (("hours", "H"), ("minutes", "M"), ("seconds", "S"))


def _number(token: Token) -> float:
    # ISO 8601 allows a comma as the decimal separator
    return float(token.replace(",", "."))


@v_args(inline=True)
class _ComponentBuilder(Transformer):
    """Folds the parse into a ComponentRecord."""

    def years(self, number):
        return [("years", _number(number))]

    def months(self, number):
        return [("months", _number(number))]

    def days(self, number):
        return [("days", _number(number))]

    def weeks(self, number):
        return [("days", _number(number) * DAYS_PER_WEEK)]

    def hours(self, number):
        return [("hours", _number(number))]

    def minutes(self, number):
        return [("minutes", _number(number))]

    def seconds(self, number):
        return [("seconds", _number(number))]

    def date_part(self, *fields):
        return [item for field in fields for item in field]

    def time_part(self, *fields):
        return [item for field in fields for item in field]

    def duration(self, *children):
        negative = False
        fields: dict[str, float] = {}
        for child in children:
            if isinstance(child, Token) and child.type == "SIGN":
                negative = child == "-"
            else:
                fields.update(child)
        record = ComponentRecord(**fields)
        return record.negated() if negative else record


_parser = Lark(
    _GRAMMAR,
    start="duration",
    parser="lalr",
    transformer=_ComponentBuilder(),
)


def parse_components(text: str) -> ComponentRecord:
    """Parse an ISO 8601 duration string into its component record.

    Raises:
        InvalidDurationError: If the text does not match the duration grammar.
    """
    try:
        return _parser.parse(text)
    except UnexpectedInput as e:
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"cannot parse duration {text!r}: {e}",
            wrapped=e,
        ) from e


def _format_number(value: float, precision: Precision) -> str:
    """Plain decimal text with the fewest digits that round-trip at ``precision``."""
    if precision is Precision.SINGLE:
        value = narrow_f32(value)
        text = f"{value:.9g}"
        for digits in range(1, 9):
            candidate = f"{value:.{digits}g}"
            if narrow_f32(float(candidate)) == value:
                text = candidate
                break
    else:
        text = repr(value)
    return format(Decimal(text).normalize(), "f")


def format_components(
    record: ComponentRecord, precision: Precision = Precision.SINGLE
) -> str:
    """Print a component record as an ISO 8601 duration string.

    Zero fields are omitted and an all-zero record prints as ``PT0S``. When
    every non-zero field is negative the sign is hoisted in front of ``P``.

    Raises:
        DurationRangeError: If a field is infinite or NaN.
    """
    values = record.astuple()
    if not all(math.isfinite(v) for v in values):
        raise DurationRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"cannot print non-finite duration component in {record!r}",
        )

    sign = ""
    if any(v < 0 for v in values) and all(v <= 0 for v in values):
        sign = "-"
        record = record.negated()

    date = "".join(
        f"{_format_number(getattr(record, name), precision)}{designator}"
        for name, designator in _DATE_DESIGNATORS
        if getattr(record, name) != 0
    )
    time = "".join(
        f"{_format_number(getattr(record, name), precision)}{designator}"
        for name, designator in _TIME_DESIGNATORS
        if getattr(record, name) != 0
    )

    if not date and not time:
        return "PT0S"
    if time:
        return f"{sign}P{date}T{time}"
    return f"{sign}P{date}"
