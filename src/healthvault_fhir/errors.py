"""Exception types raised by healthvault-fhir.

Transformers themselves define no exceptions: malformed input surfaces as the
underlying `ValidationError`, `IndexError` or `ValueError`. Only the dispatch
layer needs its own type.
"""
from __future__ import annotations


class UnsupportedThingError(TypeError):
    """Raised when no transformer is registered for a HealthVault item type."""

    def __init__(self, thing_type: type) -> None:
        self.thing_type = thing_type
        super().__init__(f"No FHIR transformer registered for {thing_type.__name__}")


__all__ = ["UnsupportedThingError"]
