from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from healthvault_fhir.converter import exercise_to_fhir, to_fhir_json
from healthvault_fhir.models.fhir import CodeableConcept, Extension, ObservationComponent, Quantity
from healthvault_fhir.models.healthvault import Exercise


def _exercise_payload() -> dict:
    return {
        "key": {"id": "item-1", "version_stamp": "3"},
        "when": {
            "approximate_date": {"year": 2020},
            "approximate_time": {"hour": 14, "minute": 30},
        },
        "activity": {"text": "Running", "codes": [{"value": "run"}]},
        "title": "Morning Run",
        "distance": {"meters": 5000},
        "duration": 30,
    }


def test_only_one_choice_value_allowed():
    with pytest.raises(ValidationError):
        ObservationComponent(
            code=CodeableConcept(),
            valueString="x",
            valueQuantity=Quantity(value=1, unit="m"),
        )
    with pytest.raises(ValidationError):
        Extension(url="u", valueString="x", valueDecimal=1.0)


def test_models_are_frozen():
    q = Quantity(value=1, unit="m")
    with pytest.raises(ValidationError):
        q.value = 2


def test_fhir_json_layout():
    obs = exercise_to_fhir(Exercise.model_validate(_exercise_payload()))
    data = to_fhir_json(obs)

    assert data["resourceType"] == "Observation"
    assert data["id"] == "item-1"
    assert data["meta"] == {"versionId": "3"}
    assert data["status"] == "final"
    assert data["effectiveDateTime"] == "2020-01-01T14:30:00"
    assert data["text"] == {"status": "generated", "div": "Morning Run"}
    assert data["component"][0] == {
        "code": {
            "coding": [
                {"system": "http://healthvault.com/fhir/stu3/ValueSets/wc", "code": "exercise-distance"}
            ]
        },
        "valueQuantity": {"value": 5000.0, "unit": "m"},
    }
    # empty arrays are not valid FHIR JSON
    assert "extension" not in data


def test_fhir_json_keeps_none_when_requested():
    obs = exercise_to_fhir(Exercise.model_validate(_exercise_payload()))
    data = to_fhir_json(obs, exclude_none=False)
    assert "lastUpdated" in data["meta"]
    assert data["meta"]["lastUpdated"] is None
    assert datetime.fromisoformat(data["effectiveDateTime"]) == datetime(2020, 1, 1, 14, 30)


def test_translated_concepts_carry_codings_only():
    obs = exercise_to_fhir(Exercise.model_validate(_exercise_payload()))
    activity = to_fhir_json(obs)["component"][-1]["valueCodeableConcept"]
    assert activity == {"coding": [{"code": "run", "display": "Running"}]}
