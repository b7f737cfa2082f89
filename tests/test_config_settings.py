from __future__ import annotations

import pytest
from pydantic import ValidationError

from healthvault_fhir.config import Settings


def test_defaults(monkeypatch):
    for key in ("LOG_LEVEL", "OUTPUT_INDENT", "OUTPUT_EXCLUDE_NONE", "FAIL_FAST", "THING_TYPES"):
        monkeypatch.delenv(key, raising=False)
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert s.OUTPUT_INDENT == 2
    assert s.OUTPUT_EXCLUDE_NONE is True
    assert s.FAIL_FAST is True
    assert s.THING_TYPES == []


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    monkeypatch.setenv("OUTPUT_INDENT", "0")
    monkeypatch.setenv("FAIL_FAST", "false")
    monkeypatch.setenv("THING_TYPES", "Exercise, ,weight")
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "DEBUG"
    assert s.OUTPUT_INDENT == 0
    assert s.FAIL_FAST is False
    assert s.THING_TYPES == ["exercise", "weight"]


def test_list_input_for_thing_types():
    s = Settings(_env_file=None, THING_TYPES=["  Exercise", ""])
    assert s.THING_TYPES == ["exercise"]


def test_negative_indent_rejected(monkeypatch):
    monkeypatch.setenv("OUTPUT_INDENT", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
