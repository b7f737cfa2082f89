"""Pydantic models for representing HealthVault item ("thing") data.

These models provide a typed, validated structure for HealthVault items as they
arrive from the HealthVault SDK or from JSON exports. They are the source side
of every transformer in `healthvault_fhir.transformers`: the transformers read
fields off these models and never mutate them.

Required fields are enforced at construction time. Anything optional here is
optional in the HealthVault item schema as well; transformers emit output only
for fields that are present.
"""
from __future__ import annotations

from typing import ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field


class CodedValue(BaseModel):
    """A single code within a HealthVault vocabulary."""

    value: str
    vocabulary_name: Optional[str] = None
    family: Optional[str] = None
    version: Optional[str] = None


class CodableValue(BaseModel):
    """Display text plus zero or more vocabulary codes for the same concept."""

    text: Optional[str] = None
    codes: List[CodedValue] = Field(default_factory=list)

    def __getitem__(self, index: int) -> CodedValue:
        return self.codes[index]


class Length(BaseModel):
    """A length measurement normalized to meters."""

    meters: float
    display: Optional[str] = None


class StructuredMeasurement(BaseModel):
    """A numeric value paired with its unit codes (first unit is authoritative)."""

    value: float
    units: CodableValue


class ApproximateDate(BaseModel):
    year: int = Field(ge=1000, le=9999)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)


class ApproximateTime(BaseModel):
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: Optional[int] = Field(default=None, ge=0, le=59)
    millisecond: Optional[int] = Field(default=None, ge=0, le=999)


class ApproximateDateTime(BaseModel):
    """A point in time with year-level precision at minimum."""

    approximate_date: ApproximateDate
    approximate_time: ApproximateTime


class ThingKey(BaseModel):
    """Identity of a stored HealthVault item."""

    id: str
    version_stamp: Optional[str] = None


class ThingBase(BaseModel):
    """Common base for all HealthVault item types.

    Subclasses set `type_id` to the HealthVault item type identifier.
    """

    type_id: ClassVar[str] = ""
    type_name: ClassVar[str] = "thing"

    key: Optional[ThingKey] = None


class ExerciseDetail(BaseModel):
    """A named measurement attached to an exercise or to one of its segments."""

    name: CodedValue
    value: StructuredMeasurement


class ExerciseSegment(BaseModel):
    """A sub-interval of an exercise session (a lap, an interval, a set)."""

    activity: CodableValue
    title: Optional[str] = None
    # Duration of the segment in minutes
    duration: Optional[float] = None
    distance: Optional[Length] = None
    # Offset from the start of the exercise, in seconds
    offset: Optional[float] = None
    details: Optional[Dict[str, ExerciseDetail]] = None


class Exercise(ThingBase):
    """The HealthVault Exercise item type.

    `details` keeps insertion order; detail extensions are emitted in that
    order by the transformer. `details` and `segments` may be null, which is
    treated the same as empty.
    """

    type_id: ClassVar[str] = "85a21ddb-db20-4c65-8d30-33c899ccf612"
    type_name: ClassVar[str] = "exercise"

    when: ApproximateDateTime
    activity: CodableValue
    title: Optional[str] = None
    distance: Optional[Length] = None
    # Duration in minutes
    duration: Optional[float] = None
    details: Optional[Dict[str, ExerciseDetail]] = None
    segments: Optional[List[ExerciseSegment]] = None
