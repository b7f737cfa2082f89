"""Transformers from HealthVault items to FHIR resources.

This package contains one module per HealthVault item type plus the shared
helpers they build on. All functions within this package are pure (no network
I/O, no file access) and deterministic.

The public API remains in the top-level `converter.py` facade. Callers should
not import directly from this package unless accessing internal helpers for
testing purposes.

Modules:
    exercise: Exercise → Observation with detail and segment extensions
    registry: Item type → transformer dispatch
    thing_base: Base Observation shell from the item key
    codings: CodableValue → CodeableConcept translation
    time_utils: ApproximateDateTime → datetime composition
    vocabularies: Fixed vocabulary URLs, codes and units

Design Invariants:
    - No network calls or file access permitted
    - Deterministic output for identical inputs
    - Source models are never mutated; each resource is created once
    - Vocabulary identifiers are fixed interchange constants
"""
from __future__ import annotations

from . import codings as codings  # noqa: F401
from . import time_utils as time_utils  # noqa: F401
from . import vocabularies as vocabularies  # noqa: F401

__all__ = ["codings", "time_utils", "vocabularies"]
