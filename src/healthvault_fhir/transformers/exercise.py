"""HealthVault Exercise → FHIR Observation transformation.

An exercise becomes a vital-signs Observation coded `exercise` in the HealthVault
vocabularies system. Scalar measurements become components; free-form details
and segments, which have no FHIR counterpart, become extensions.

Output layout:
    component: exercise-distance (if distance), exercise-duration (if duration),
               exercise-activity (always), in that order
    text.div: exercise title, verbatim
    effectiveDateTime: composed from the approximate date/time
    extension: one exercise-detail per detail (insertion order), then one
               exercise-segment per segment (sequence order)

Public Functions:
    exercise_to_fhir: Convert an Exercise, optionally onto an existing shell
    create_detail_extension: Build the exercise-detail extension for one detail
    create_segment_extension: Build the exercise-segment extension for one segment

Design Notes:
    - Components and extensions accumulate in local lists and the Observation
      is created once; the shell passed in is never modified.
    - An empty unit list on a detail value raises IndexError. Callers must not
      pass such details.
    - The detail type concept is translated from a codable value whose text is
      the detail name's own code value, so display equals code there.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from ..models.fhir import (
    Extension,
    Narrative,
    Observation,
    ObservationComponent,
    Quantity,
)
from ..models.healthvault import CodableValue, Exercise, ExerciseDetail, ExerciseSegment
from . import vocabularies as vocab
from .codings import codable_value_to_fhir
from .thing_base import thing_to_observation_shell
from .time_utils import approximate_datetime_to_fhir

logger = logging.getLogger(__name__)

__all__ = [
    "exercise_to_fhir",
    "create_detail_extension",
    "create_segment_extension",
]


def exercise_to_fhir(exercise: Exercise, observation: Optional[Observation] = None) -> Observation:
    """Convert a HealthVault exercise into a FHIR Observation.

    Args:
        exercise: Fully populated exercise item
        observation: Base shell carrying identity fields; built from the
            exercise key when omitted. Components and extensions already on
            the shell are kept ahead of the ones added here.

    Returns:
        New Observation with category, code, components, narrative, effective
        time and extensions populated
    """
    if observation is None:
        observation = thing_to_observation_shell(exercise)

    components: List[ObservationComponent] = list(observation.component)
    extensions: List[Extension] = list(observation.extension)

    if exercise.distance is not None:
        components.append(
            ObservationComponent(
                code=vocab.healthvault_code(vocab.EXERCISE_DISTANCE),
                valueQuantity=Quantity(value=exercise.distance.meters, unit=vocab.UNIT_METERS),
            )
        )

    if exercise.duration is not None:
        components.append(
            ObservationComponent(
                code=vocab.healthvault_code(vocab.EXERCISE_DURATION),
                valueQuantity=Quantity(value=exercise.duration, unit=vocab.UNIT_MINUTES),
            )
        )

    components.append(
        ObservationComponent(
            code=vocab.healthvault_code(vocab.EXERCISE_ACTIVITY),
            valueCodeableConcept=codable_value_to_fhir(exercise.activity, None),
        )
    )

    if exercise.details is not None:
        for key, detail in exercise.details.items():
            extensions.append(create_detail_extension(key, detail))

    if exercise.segments:
        for segment in exercise.segments:
            extensions.append(create_segment_extension(segment))

    logger.debug(
        "exercise key=%s mapped components=%d details=%d segments=%d",
        exercise.key.id if exercise.key else None,
        len(components),
        len(exercise.details or {}),
        len(exercise.segments or []),
    )

    return observation.model_copy(
        update={
            "category": [vocab.VITAL_SIGNS],
            "code": vocab.healthvault_code(vocab.EXERCISE),
            "component": components,
            "text": Narrative(div=exercise.title),
            "effectiveDateTime": approximate_datetime_to_fhir(exercise.when),
            "extension": extensions,
        }
    )


def create_detail_extension(key: str, detail: ExerciseDetail) -> Extension:
    """Build the `exercise-detail` extension (name, type, value) for one detail."""
    detail_type = CodableValue(text=detail.name.value, codes=[detail.name])
    return Extension(
        url=vocab.BASE_URI + vocab.EXERCISE_DETAIL,
        extension=[
            Extension(url=vocab.EXERCISE_DETAIL_NAME, valueString=key),
            Extension(
                url=vocab.EXERCISE_DETAIL_TYPE,
                valueCodeableConcept=codable_value_to_fhir(detail_type, None),
            ),
            Extension(
                url=vocab.EXERCISE_DETAIL_VALUE,
                valueQuantity=Quantity(
                    value=detail.value.value,
                    unit=detail.value.units[0].value,
                ),
            ),
        ],
    )


def create_segment_extension(segment: ExerciseSegment) -> Extension:
    """Build the `exercise-segment` extension for one segment.

    Only the activity is mandatory; every other sub-extension appears only when
    the segment carries the corresponding field. Segment details are appended
    last as nested `exercise-detail` extensions.
    """
    parts: List[Extension] = [
        Extension(
            url=vocab.EXERCISE_SEGMENT_ACTIVITY,
            valueCodeableConcept=codable_value_to_fhir(segment.activity, None),
        )
    ]

    if segment.title:
        parts.append(Extension(url=vocab.EXERCISE_SEGMENT_TITLE, valueString=segment.title))

    if segment.duration is not None:
        parts.append(Extension(url=vocab.EXERCISE_SEGMENT_DURATION, valueDecimal=segment.duration))

    if segment.distance is not None:
        parts.append(
            Extension(
                url=vocab.EXERCISE_SEGMENT_DISTANCE,
                valueQuantity=Quantity(value=segment.distance.meters, unit=vocab.UNIT_METERS),
            )
        )

    if segment.offset is not None:
        parts.append(Extension(url=vocab.EXERCISE_SEGMENT_OFFSET, valueDecimal=segment.offset))

    if segment.details is not None:
        for key, detail in segment.details.items():
            parts.append(create_detail_extension(key, detail))

    return Extension(url=vocab.BASE_URI + vocab.EXERCISE_SEGMENT, extension=parts)
