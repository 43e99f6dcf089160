# structview/core/attributes.py
from __future__ import annotations

from typing import Any, Collection

from structview.contracts.keys import KeyRequest, select_keys


def resolve_attributes(entity: Any, keys: KeyRequest, names: Collection[str]) -> dict[Any, Any]:
    """
    Key/value view of an entity's declared attributes.

    ``names`` are the attributes declared by the entity's type. Values are read
    with ``getattr``, so a deferred or expired column loads itself; columns
    that were not asked for stay unloaded.
    """
    return select_keys(keys, names, lambda name: getattr(entity, name))
