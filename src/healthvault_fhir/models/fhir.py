"""Pydantic models for the FHIR resources produced by the transformers.

Only the subset of the FHIR STU3 Observation shape that the transformers
populate is modelled here. Field names follow the FHIR JSON names so that
`model_dump(mode="json", exclude_none=True)` yields interchange-ready JSON
without an extra mapping step. Choice-typed elements (`value[x]`) are modelled
as one optional field per allowed type; at most one may be set.

Models are frozen: transformers build component and extension lists locally and
create each resource once.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

_VALUE_FIELDS = (
    "valueString",
    "valueDecimal",
    "valueQuantity",
    "valueCodeableConcept",
)


class FhirElement(BaseModel):
    """Common configuration for all FHIR datatypes."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Coding(FhirElement):
    system: Optional[str] = None
    version: Optional[str] = None
    code: Optional[str] = None
    display: Optional[str] = None


class CodeableConcept(FhirElement):
    coding: List[Coding] = Field(default_factory=list)
    text: Optional[str] = None

    @classmethod
    def from_code(cls, system: str, code: str, display: Optional[str] = None) -> "CodeableConcept":
        """Build a concept holding exactly one coding."""
        return cls(coding=[Coding(system=system, code=code, display=display)])


class Quantity(FhirElement):
    value: Optional[float] = None
    unit: Optional[str] = None
    system: Optional[str] = None
    code: Optional[str] = None


class Narrative(FhirElement):
    status: Literal["generated", "extensions", "additional", "empty"] = "generated"
    div: Optional[str] = None


class Meta(FhirElement):
    versionId: Optional[str] = None
    lastUpdated: Optional[datetime] = None


class _ChoiceValue(FhirElement):
    """Mixin enforcing that at most one `value[x]` field is populated."""

    @model_validator(mode="after")
    def _single_value(self):
        present = [name for name in _VALUE_FIELDS if getattr(self, name, None) is not None]
        if len(present) > 1:
            raise ValueError(f"only one value[x] may be set, got {present}")
        return self


class Extension(_ChoiceValue):
    """A FHIR extension; either carries a value or nested extensions."""

    url: str
    valueString: Optional[str] = None
    valueDecimal: Optional[float] = None
    valueQuantity: Optional[Quantity] = None
    valueCodeableConcept: Optional[CodeableConcept] = None
    extension: List[Extension] = Field(default_factory=list)


class ObservationComponent(_ChoiceValue):
    code: CodeableConcept
    valueString: Optional[str] = None
    valueDecimal: Optional[float] = None
    valueQuantity: Optional[Quantity] = None
    valueCodeableConcept: Optional[CodeableConcept] = None


class Observation(FhirElement):
    """The FHIR Observation resource.

    `status` and `code` are mandatory in FHIR; the shell factory fills `status`
    and every transformer fills `code`, so both stay optional here to allow an
    empty shell to exist between those two steps.
    """

    resourceType: Literal["Observation"] = "Observation"
    id: Optional[str] = None
    meta: Optional[Meta] = None
    text: Optional[Narrative] = None
    extension: List[Extension] = Field(default_factory=list)
    status: Optional[str] = None
    category: List[CodeableConcept] = Field(default_factory=list)
    code: Optional[CodeableConcept] = None
    effectiveDateTime: Optional[datetime] = None
    component: List[ObservationComponent] = Field(default_factory=list)
