"""Base resource construction shared by all HealthVault item transformers.

Every HealthVault item maps to a FHIR resource whose identity comes from the
item key: `id` is the item id and `meta.versionId` the version stamp. Type
specific transformers start from the shell built here and add their own fields.
"""
from __future__ import annotations

from ..models.fhir import Meta, Observation
from ..models.healthvault import ThingBase

__all__ = ["thing_to_observation_shell"]


def thing_to_observation_shell(thing: ThingBase) -> Observation:
    """Build an Observation holding only the base fields derived from `thing`.

    Items without a key (not yet stored) produce a shell without `id` or
    `meta`. The status is always `final`.
    """
    if thing.key is None:
        return Observation(status="final")
    meta = None
    if thing.key.version_stamp:
        meta = Meta(versionId=thing.key.version_stamp)
    return Observation(id=thing.key.id, meta=meta, status="final")
