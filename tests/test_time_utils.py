from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from healthvault_fhir.models.healthvault import ApproximateDate, ApproximateDateTime, ApproximateTime
from healthvault_fhir.transformers.time_utils import approximate_datetime_to_fhir


def _when(date: dict, time: dict) -> ApproximateDateTime:
    return ApproximateDateTime(
        approximate_date=ApproximateDate(**date),
        approximate_time=ApproximateTime(**time),
    )


def test_year_only_defaults_to_january_first():
    when = _when({"year": 2020}, {"hour": 14, "minute": 30})
    assert approximate_datetime_to_fhir(when) == datetime(2020, 1, 1, 14, 30, 0)


def test_full_precision_is_kept_and_milliseconds_dropped():
    when = _when(
        {"year": 2019, "month": 11, "day": 3},
        {"hour": 6, "minute": 5, "second": 59, "millisecond": 500},
    )
    assert approximate_datetime_to_fhir(when) == datetime(2019, 11, 3, 6, 5, 59)


def test_result_is_naive():
    when = _when({"year": 2021, "month": 2}, {"hour": 0, "minute": 0})
    assert approximate_datetime_to_fhir(when).tzinfo is None


def test_impossible_calendar_date_raises_from_datetime():
    when = _when({"year": 2021, "month": 2, "day": 30}, {"hour": 0, "minute": 0})
    with pytest.raises(ValueError):
        approximate_datetime_to_fhir(when)


def test_out_of_range_parts_rejected_by_model():
    with pytest.raises(ValidationError):
        ApproximateTime(hour=24, minute=0)
    with pytest.raises(ValidationError):
        ApproximateDate(year=2020, month=13)
