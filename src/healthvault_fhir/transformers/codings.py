"""Translation of HealthVault codable values into FHIR codeable concepts.

A HealthVault `CodableValue` carries display text plus any number of codes, each
qualified by a vocabulary name and family (e.g. family `wc`, vocabulary
`exercise-activities`). FHIR expresses the same idea as a `CodeableConcept` whose
codings each name a `system` URL.

System URL format:
    family + vocabulary:  f"{BASE_URI}{family}:{vocabulary_name}"
    vocabulary only:      f"{BASE_URI}{vocabulary_name}"
    neither:              None (code is local / unqualified)

Public Functions:
    codable_value_to_fhir: Convert a CodableValue to a CodeableConcept
    vocabulary_system_url: Build the system URL for a vocabulary reference

Design Note:
    Pure and total for well-formed input. Nothing here raises on its own; any
    exception comes from a malformed model and is left to propagate.
"""
from __future__ import annotations

from typing import List, Optional

from ..models.fhir import CodeableConcept, Coding
from ..models.healthvault import CodableValue, CodedValue
from .vocabularies import BASE_URI

__all__ = ["codable_value_to_fhir", "vocabulary_system_url"]


def vocabulary_system_url(vocabulary_name: Optional[str], family: Optional[str]) -> Optional[str]:
    if not vocabulary_name:
        return None
    if family:
        return f"{BASE_URI}{family}:{vocabulary_name}"
    return f"{BASE_URI}{vocabulary_name}"


def _coded_value_to_coding(coded: CodedValue, display: Optional[str]) -> Coding:
    return Coding(
        system=vocabulary_system_url(coded.vocabulary_name, coded.family),
        version=coded.version,
        code=coded.value,
        display=display,
    )


def codable_value_to_fhir(
    codable_value: CodableValue, context_hint: Optional[Coding] = None
) -> CodeableConcept:
    """Convert a HealthVault codable value into a FHIR codeable concept.

    Each coded entry becomes one coding, in order, with the codable value's
    text as its display. When the codable value has no codes at all, the
    `context_hint` coding is used instead (its display filled from the text if
    it has none); without a hint a display-only coding keeps the text visible
    to consumers that only read codings.

    Args:
        codable_value: Source concept (text plus zero or more codes)
        context_hint: Optional coding to fall back on when no codes exist

    Returns:
        CodeableConcept carrying codings only; the text survives as the
        coding display and `CodeableConcept.text` stays unset
    """
    text = codable_value.text
    codings: List[Coding] = [_coded_value_to_coding(c, text) for c in codable_value.codes]
    if not codings:
        if context_hint is not None:
            if context_hint.display is None and text is not None:
                context_hint = context_hint.model_copy(update={"display": text})
            codings = [context_hint]
        elif text is not None:
            codings = [Coding(display=text)]
    return CodeableConcept(coding=codings)
