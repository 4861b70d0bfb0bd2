"""Unit conversion factors and resource limits for ISO 8601 duration conversion."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
DAYS_PER_WEEK = 7

NANOSECONDS_PER_MICROSECOND = 1_000
NANOSECONDS_PER_MILLISECOND = 1_000_000
NANOSECONDS_PER_SECOND = 1_000_000_000

MIN_WHOLE_SECONDS = -(2**63)
"""Smallest whole-seconds count a Duration can hold (signed 64-bit)."""

MAX_WHOLE_SECONDS = 2**63 - 1
"""Largest whole-seconds count a Duration can hold (signed 64-bit)."""

DEFAULT_MAX_DURATION_LENGTH = 256
"""Maximum accepted length of an ISO 8601 duration string (CWE-400 prevention)."""
