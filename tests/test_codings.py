from __future__ import annotations

from healthvault_fhir.models.fhir import Coding
from healthvault_fhir.models.healthvault import CodableValue, CodedValue
from healthvault_fhir.transformers.codings import codable_value_to_fhir, vocabulary_system_url

BASE = "http://healthvault.com/fhir/stu3/ValueSets/"


def test_system_url_variants():
    assert vocabulary_system_url("exercise-activities", "wc") == BASE + "wc:exercise-activities"
    assert vocabulary_system_url("exercise-activities", None) == BASE + "exercise-activities"
    assert vocabulary_system_url(None, "wc") is None
    assert vocabulary_system_url("", "wc") is None


def test_one_coding_per_code_in_order():
    cv = CodableValue(
        text="Cycling",
        codes=[
            CodedValue(value="bike", vocabulary_name="exercise-activities", family="wc", version="2"),
            CodedValue(value="11", vocabulary_name="aerobic-activities"),
        ],
    )
    concept = codable_value_to_fhir(cv)
    assert concept.text is None
    assert [c.code for c in concept.coding] == ["bike", "11"]
    assert concept.coding[0].system == BASE + "wc:exercise-activities"
    assert concept.coding[0].version == "2"
    assert concept.coding[1].system == BASE + "aerobic-activities"
    assert all(c.display == "Cycling" for c in concept.coding)


def test_text_only_value_yields_display_only_coding():
    concept = codable_value_to_fhir(CodableValue(text="Yoga"))
    assert concept.coding == [Coding(display="Yoga")]
    assert concept.text is None


def test_context_hint_used_when_no_codes():
    hint = Coding(system="http://example.org/activities", code="other")
    concept = codable_value_to_fhir(CodableValue(text="Climbing"), hint)
    assert concept.coding == [
        Coding(system="http://example.org/activities", code="other", display="Climbing")
    ]
    # hint instance itself is left untouched
    assert hint.display is None


def test_context_hint_ignored_when_codes_exist():
    hint = Coding(code="other")
    concept = codable_value_to_fhir(CodableValue(text="Run", codes=[CodedValue(value="run")]), hint)
    assert [c.code for c in concept.coding] == ["run"]


def test_empty_value_yields_empty_concept():
    concept = codable_value_to_fhir(CodableValue())
    assert concept.coding == []
    assert concept.text is None
