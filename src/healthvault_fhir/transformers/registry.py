"""Dispatch of HealthVault item types to their FHIR transformers.

The registry is a plain mapping from item model class to transformer function,
built once at import time and only read afterwards. Lookup uses a two-tier
strategy:

1.  **Exact Match:** the item's own class is a registered key.
2.  **Subclass Match:** otherwise the first registered class the item is an
    instance of, in registration order.

Items matching neither raise `UnsupportedThingError`.

Public Functions:
    thing_to_fhir: Convert any registered HealthVault item to its FHIR resource
    transformer_for: Resolve the transformer for an item class
    thing_type_by_name: Resolve an item class from its short name (CLI use)
    registered_type_names: Short names of all registered item classes
"""
from __future__ import annotations

from typing import Callable, Dict, List, Type

from ..errors import UnsupportedThingError
from ..models.fhir import Observation
from ..models.healthvault import Exercise, ThingBase
from .exercise import exercise_to_fhir

Transformer = Callable[..., Observation]

TRANSFORMERS: Dict[Type[ThingBase], Transformer] = {
    Exercise: exercise_to_fhir,
}

__all__ = [
    "TRANSFORMERS",
    "thing_to_fhir",
    "transformer_for",
    "thing_type_by_name",
    "registered_type_names",
]


def transformer_for(thing_type: Type[ThingBase]) -> Transformer:
    transformer = TRANSFORMERS.get(thing_type)
    if transformer is not None:
        return transformer
    for registered, candidate in TRANSFORMERS.items():
        if issubclass(thing_type, registered):
            return candidate
    raise UnsupportedThingError(thing_type)


def thing_to_fhir(thing: ThingBase) -> Observation:
    """Convert `thing` with the transformer registered for its type."""
    return transformer_for(type(thing))(thing)


def thing_type_by_name(name: str) -> Type[ThingBase]:
    """Return the registered item class whose `type_name` or `type_id` matches.

    Matching is case-insensitive with surrounding whitespace trimmed.
    """
    wanted = name.strip().lower()
    for registered in TRANSFORMERS:
        if wanted in (registered.type_name.lower(), registered.type_id.lower()):
            return registered
    raise KeyError(name)


def registered_type_names() -> List[str]:
    return [registered.type_name for registered in TRANSFORMERS]
