# structview/core/inspection.py
"""
Declared names of entity and model types.

Names are fixed by the type, so they are computed once per class.
"""
from __future__ import annotations

from functools import lru_cache

from sqlalchemy import inspect as sa_inspect


@lru_cache(maxsize=None)
def mapped_attributes(cls: type) -> tuple[str, ...]:
    """Column attribute keys of a mapped class, in declaration order."""
    return tuple(prop.key for prop in sa_inspect(cls).column_attrs)


@lru_cache(maxsize=None)
def mapped_relationships(cls: type) -> dict[str, bool]:
    """Relationship keys of a mapped class, each flagged True when it is a collection."""
    return {rel.key: bool(rel.uselist) for rel in sa_inspect(cls).relationships}


@lru_cache(maxsize=None)
def model_attributes(cls: type) -> tuple[str, ...]:
    """Field names of a pydantic model class."""
    return tuple(cls.model_fields)
