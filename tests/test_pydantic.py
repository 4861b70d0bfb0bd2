"""Pydantic field integration tests."""

from datetime import timedelta
from typing import Annotated

import pytest
from pydantic import BaseModel, ValidationError

from pydur8601 import Duration, Precision
from pydur8601.serde import IsoDuration, IsoDurationCodec, IsoTimedelta


class Job(BaseModel):
    timeout: IsoDuration


class Task(BaseModel):
    interval: IsoTimedelta


class PreciseJob(BaseModel):
    timeout: Annotated[Duration, IsoDurationCodec(precision="double")]


class OptionalJob(BaseModel):
    timeout: IsoDuration | None = None


class TestSerialize:
    def test_days(self):
        assert Job(timeout=Duration.days(5)).model_dump_json() == '{"timeout":"P5D"}'

    def test_complex(self):
        d = Duration.days(2) + Duration.hours(3) + Duration.minutes(30) + Duration.seconds(15)
        assert Job(timeout=d).model_dump_json() == '{"timeout":"P2DT3H30M15S"}'

    def test_python_mode_also_emits_string(self):
        assert Job(timeout=Duration.hours(3)).model_dump() == {"timeout": "PT3H"}

    def test_timedelta_field(self):
        task = Task(interval=timedelta(minutes=15))
        assert task.model_dump_json() == '{"interval":"PT15M"}'

    def test_double_precision(self):
        job = PreciseJob(timeout=Duration.new(59, 999_999_999))
        assert job.model_dump_json() == '{"timeout":"PT59.999999999S"}'

    def test_optional_none(self):
        assert OptionalJob().model_dump_json() == '{"timeout":null}'


class TestValidate:
    def test_from_json(self):
        job = Job.model_validate_json('{"timeout":"P1DT12H30M45S"}')
        expected = Duration.days(1) + Duration.hours(12) + Duration.minutes(30) + Duration.seconds(45)
        assert job.timeout == expected

    def test_from_string(self):
        assert Job(timeout="PT30M").timeout == Duration.minutes(30)

    def test_from_duration(self):
        assert Job(timeout=Duration.seconds(45)).timeout == Duration.seconds(45)

    def test_from_timedelta(self):
        assert Job(timeout=timedelta(minutes=30)).timeout == Duration.minutes(30)

    def test_timedelta_field_from_string(self):
        assert Task(interval="PT1.5S").interval == timedelta(seconds=1.5)

    def test_timedelta_field_from_duration(self):
        assert Task(interval=Duration.hours(2)).interval == timedelta(hours=2)

    def test_optional_value(self):
        assert OptionalJob(timeout="PT1H").timeout == Duration.hours(1)

    def test_round_trip(self):
        job = Job(timeout=Duration.days(7) + Duration.seconds(1))
        assert Job.model_validate_json(job.model_dump_json()) == job


class TestValidationErrors:
    def test_calendar_units(self):
        with pytest.raises(ValidationError) as exc_info:
            Job.model_validate_json('{"timeout":"P1M"}')
        error = exc_info.value.errors()[0]
        assert error["type"] == "iso_duration"
        assert "years and months must be zero" in error["msg"]

    def test_malformed(self):
        with pytest.raises(ValidationError) as exc_info:
            Job(timeout="1 hour")
        assert exc_info.value.errors()[0]["type"] == "iso_duration"

    def test_wrong_type(self):
        with pytest.raises(ValidationError) as exc_info:
            Job(timeout=5)
        assert exc_info.value.errors()[0]["type"] == "iso_duration_type"

    def test_max_length(self):
        class ShortJob(BaseModel):
            timeout: Annotated[Duration, IsoDurationCodec(max_length=4)]

        with pytest.raises(ValidationError, match="too long"):
            ShortJob(timeout="PT100S")

    def test_timedelta_out_of_range(self):
        with pytest.raises(ValidationError) as exc_info:
            Task(interval="P1000000000D")
        error = exc_info.value.errors()[0]
        assert error["type"] == "iso_duration"
        assert "duration out of range" in error["msg"]


class TestCodecConfiguration:
    def test_precision_coerced_from_name(self):
        assert IsoDurationCodec(precision="double").precision is Precision.DOUBLE

    def test_unknown_precision_rejected_up_front(self):
        with pytest.raises(ValueError):
            IsoDurationCodec(precision="quad")


class TestJsonSchema:
    def test_string_with_duration_format(self):
        prop = Job.model_json_schema()["properties"]["timeout"]
        assert prop["type"] == "string"
        assert prop["format"] == "duration"
