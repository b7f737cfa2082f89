"""Fixed vocabulary identifiers shared by the HealthVault → FHIR transformers.

Every URL, code and extension name in this module is part of the interchange
contract with downstream FHIR consumers and MUST NOT change. Consumers match on
these strings byte-for-byte.

Constants:
    BASE_URI: Root of all HealthVault value-set URLs and extension URLs
    HEALTHVAULT_VOCABULARIES_URI: Coding system for HealthVault-defined codes
    VITAL_SIGNS: Observation category applied to exercise observations
"""
from __future__ import annotations

from ..models.fhir import CodeableConcept

BASE_URI = "http://healthvault.com/fhir/stu3/ValueSets/"
HEALTHVAULT_VOCABULARIES_URI = BASE_URI + "wc"

FHIR_OBSERVATION_CATEGORY_URI = "http://hl7.org/fhir/observation-category"

# HealthVault vocabulary codes
EXERCISE = "exercise"
EXERCISE_DISTANCE = "exercise-distance"
EXERCISE_DURATION = "exercise-duration"
EXERCISE_ACTIVITY = "exercise-activity"
EXERCISE_DETAIL = "exercise-detail"
EXERCISE_SEGMENT = "exercise-segment"

# Sub-extension names nested inside the detail and segment extensions
EXERCISE_DETAIL_NAME = "exercise-detail-name"
EXERCISE_DETAIL_TYPE = "exercise-detail-type"
EXERCISE_DETAIL_VALUE = "exercise-detail-value"
EXERCISE_SEGMENT_ACTIVITY = "exercise-segment-activity"
EXERCISE_SEGMENT_TITLE = "exercise-segment-title"
EXERCISE_SEGMENT_DURATION = "exercise-segment-duration"
EXERCISE_SEGMENT_DISTANCE = "exercise-segment-distance"
EXERCISE_SEGMENT_OFFSET = "exercise-segment-offset"

# Units
UNIT_METERS = "m"
UNIT_MINUTES = "min"

VITAL_SIGNS = CodeableConcept.from_code(
    FHIR_OBSERVATION_CATEGORY_URI, "vital-signs", "Vital Signs"
)

__all__ = [
    "BASE_URI",
    "HEALTHVAULT_VOCABULARIES_URI",
    "FHIR_OBSERVATION_CATEGORY_URI",
    "EXERCISE",
    "EXERCISE_DISTANCE",
    "EXERCISE_DURATION",
    "EXERCISE_ACTIVITY",
    "EXERCISE_DETAIL",
    "EXERCISE_SEGMENT",
    "EXERCISE_DETAIL_NAME",
    "EXERCISE_DETAIL_TYPE",
    "EXERCISE_DETAIL_VALUE",
    "EXERCISE_SEGMENT_ACTIVITY",
    "EXERCISE_SEGMENT_TITLE",
    "EXERCISE_SEGMENT_DURATION",
    "EXERCISE_SEGMENT_DISTANCE",
    "EXERCISE_SEGMENT_OFFSET",
    "UNIT_METERS",
    "UNIT_MINUTES",
    "VITAL_SIGNS",
    "healthvault_code",
]


def healthvault_code(code: str) -> CodeableConcept:
    """Return a concept with a single coding in the HealthVault vocabularies system."""
    return CodeableConcept.from_code(HEALTHVAULT_VOCABULARIES_URI, code)
