"""Hypothesis property-based tests.

Round-trip properties that must hold for all durations in the stated ranges.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pydur8601 import Duration, Precision, decode, encode

# Whole-second counts whose day component is exact in float32
_SINGLE_EXACT_SECONDS = st.integers(
    min_value=-(2**24 - 1) * 86_400,
    max_value=(2**24 - 1) * 86_400,
)

_I64_SECONDS = st.integers(min_value=-(2**63) + 1, max_value=2**63 - 1)

_NANOSECONDS = st.integers(min_value=0, max_value=999_999_999)


class TestSinglePrecision:
    @given(seconds=_SINGLE_EXACT_SECONDS)
    @settings(max_examples=200)
    def test_whole_seconds_round_trip(self, seconds):
        d = Duration.seconds(seconds)
        assert decode(encode(d)) == d

    @given(seconds=_SINGLE_EXACT_SECONDS, nanoseconds=_NANOSECONDS)
    @settings(max_examples=200)
    def test_subsecond_round_trip_is_close(self, seconds, nanoseconds):
        sign = -1 if seconds < 0 else 1
        d = Duration.new(seconds, sign * nanoseconds)
        assert abs(decode(encode(d)) - d) < Duration.milliseconds(1)


class TestDoublePrecision:
    @given(seconds=_I64_SECONDS)
    @settings(max_examples=200)
    def test_whole_seconds_round_trip(self, seconds):
        d = Duration.seconds(seconds)
        assert decode(encode(d, precision=Precision.DOUBLE), precision=Precision.DOUBLE) == d

    @given(seconds=_I64_SECONDS, nanoseconds=_NANOSECONDS)
    @settings(max_examples=200)
    def test_nanosecond_round_trip(self, seconds, nanoseconds):
        sign = -1 if seconds < 0 else 1
        d = Duration.new(seconds, sign * nanoseconds)
        assert decode(encode(d, precision="double"), precision="double") == d
