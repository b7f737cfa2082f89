"""Composition of HealthVault approximate date/times into FHIR timestamps.

HealthVault stores points in time with partial precision: a year is always
present, month and day may be missing, and seconds are optional. FHIR's
`dateTime` used for `effectiveDateTime` is emitted at full precision, so missing
parts are defaulted.

Defaults:
    month -> 1, day -> 1, second -> 0, millisecond -> dropped

Public Functions:
    approximate_datetime_to_fhir: Compose a datetime from an ApproximateDateTime

Design Note:
    The result is naive. HealthVault approximate times carry no zone and the
    consumer decides how to interpret them; no conversion to UTC happens here.
    Calendar consistency is left to `datetime` itself, so an impossible date
    such as February 30 raises ValueError from the constructor.
"""
from __future__ import annotations

from datetime import datetime

from ..models.healthvault import ApproximateDateTime

__all__ = ["approximate_datetime_to_fhir"]


def approximate_datetime_to_fhir(when: ApproximateDateTime) -> datetime:
    date = when.approximate_date
    time = when.approximate_time
    return datetime(
        date.year,
        date.month if date.month is not None else 1,
        date.day if date.day is not None else 1,
        time.hour,
        time.minute,
        time.second if time.second is not None else 0,
    )
