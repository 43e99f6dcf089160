# structview/core/facade.py
"""
Destructuring entry points.

``destructure_keys`` backs mapping patterns and ``destructure_sequence`` backs
sequence patterns::

    match destructure_keys(person):
        case {"name": "Mary"}:
            greeting = "Welcome back, Mary!"
        case {"name": name}:
            greeting = f"Welcome, {name}!"

    match destructure_sequence(Collection.from_statement(session, select(Person))):
        case []:
            ...
        case [Person(name="Mary")]:
            ...

A value that is not destructurable in the requested way yields ``None``, so
the pattern branch simply does not match.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from structview.contracts.capability import MapDestructurable, SequenceDestructurable, Shape
from structview.contracts.keys import KeyRequest
from structview.core.associations import resolve_associations
from structview.core.attributes import resolve_attributes
from structview.core.collection import materialize
from structview.core.gate import guarded_deconstruct
from structview.core.inspection import mapped_attributes, model_attributes
from structview.core.registry import CapabilityRegistry, registry as default_registry


def _registry(registry: CapabilityRegistry | None) -> CapabilityRegistry:
    return default_registry if registry is None else registry


def destructure_keys(
    value: Any,
    keys: KeyRequest = None,
    *,
    registry: CapabilityRegistry | None = None,
) -> dict[Any, Any] | None:
    shape = _registry(registry).shape_of(value)
    if keys is not None:
        keys = list(keys)

    if shape is Shape.ENTITY:
        result = resolve_attributes(value, keys, mapped_attributes(type(value)))
        result.update(resolve_associations(value, keys))
        return result
    if shape is Shape.MODEL:
        return resolve_attributes(value, keys, model_attributes(type(value)))
    if shape is Shape.PARAMETERS:
        return guarded_deconstruct(value, keys)
    if shape is Shape.COLLECTION:
        return None

    if isinstance(value, MapDestructurable):
        return value.deconstruct_keys(keys)
    if isinstance(value, Mapping):
        if keys is None:
            return dict(value)
        # Foreign mapping: its keys are not names, look them up exactly
        return {key: value[key] for key in keys if key in value}
    return None


def destructure_sequence(
    value: Any,
    *,
    registry: CapabilityRegistry | None = None,
) -> Sequence[Any] | None:
    shape = _registry(registry).shape_of(value)

    if shape is Shape.COLLECTION:
        return materialize(value)
    if shape is not Shape.PRIMITIVE:
        return None

    if isinstance(value, SequenceDestructurable):
        return value.deconstruct()
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    return None
