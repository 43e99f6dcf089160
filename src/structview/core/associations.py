# structview/core/associations.py
from __future__ import annotations

from typing import Any

from structview.contracts.keys import KeyRequest, select_keys
from structview.core.collection import Collection
from structview.core.inspection import mapped_relationships


def resolve_associations(entity: Any, keys: KeyRequest) -> dict[Any, Any]:
    """
    Key/value view of a mapped entity's declared relationships.

    To-one relationships are read through the entity, which performs its own
    lazy load. To-many relationships come back as an unloaded ``Collection``
    that fetches only when it is destructured.
    """
    relationships = mapped_relationships(type(entity))

    def read(name: str) -> Any:
        if relationships[name]:
            return Collection.from_relationship(entity, name)
        return getattr(entity, name)

    return select_keys(keys, relationships, read)
