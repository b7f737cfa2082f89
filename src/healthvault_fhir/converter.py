"""Public facade for HealthVault item to FHIR resource conversion.

This module provides the stable public API for converting HealthVault items
into FHIR resources. All mapping logic is delegated to the
healthvault_fhir.transformers package; the facade only re-exports the entry
points and adds JSON serialization for callers that need interchange output.

Public Functions:
    thing_to_fhir: Convert any registered HealthVault item
    exercise_to_fhir: Convert an Exercise, optionally onto an existing shell
    to_fhir_json: Serialize a FHIR resource model to a JSON-compatible dict

Internal Re-exports:
    create_detail_extension: Detail extension builder (test usage)
    create_segment_extension: Segment extension builder (test usage)
"""
from __future__ import annotations

from typing import Any, Dict

from .models.fhir import FhirElement
from .transformers.exercise import (
    create_detail_extension,
    create_segment_extension,
    exercise_to_fhir,
)
from .transformers.registry import thing_to_fhir

__all__ = [
    "thing_to_fhir",
    "exercise_to_fhir",
    "to_fhir_json",
    # Helper re-exports (test-only / internal use)
    "create_detail_extension",
    "create_segment_extension",
]


def to_fhir_json(resource: FhirElement, *, exclude_none: bool = True) -> Dict[str, Any]:
    """Dump a FHIR model to a JSON-compatible dict.

    Datetimes become ISO 8601 strings. With `exclude_none` (the default) unset
    optional elements are omitted, which is how FHIR JSON expresses absence.
    Empty lists are always omitted as FHIR forbids empty arrays.

    Args:
        resource: Any FHIR model instance (typically an Observation)
        exclude_none: Drop None-valued elements from the output

    Returns:
        Nested dict ready for `json.dumps`
    """
    dumped = resource.model_dump(mode="json", exclude_none=exclude_none)
    return _drop_empty_lists(dumped)


def _drop_empty_lists(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_empty_lists(v) for k, v in value.items() if v != []}
    if isinstance(value, list):
        return [_drop_empty_lists(v) for v in value]
    return value
