# structview/contracts/capability.py
"""
Capability contracts for structural destructuring.

A value is either *map-shaped* (it can be viewed as a ``dict`` for mapping
patterns) or *sequence-shaped* (it can be viewed as an ordered sequence for
sequence patterns). Types gain a capability in one of two ways:

- natively, by implementing ``MapDestructurable`` / ``SequenceDestructurable``
- by adaptation, by being registered under a ``Shape`` in a
  ``CapabilityRegistry``
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, Sequence, runtime_checkable

from structview.contracts.keys import KeyRequest


class Capability(str, Enum):
    MAP = "map"
    SEQUENCE = "sequence"

    @property
    def method_name(self) -> str:
        """Name of the protocol method a native implementation defines."""
        return "deconstruct_keys" if self is Capability.MAP else "deconstruct"


class Shape(str, Enum):
    """Explicit tag the facade dispatches on."""

    ENTITY = "entity"
    MODEL = "model"
    PARAMETERS = "parameters"
    COLLECTION = "collection"
    PRIMITIVE = "primitive"

    @property
    def capability(self) -> Capability | None:
        if self is Shape.COLLECTION:
            return Capability.SEQUENCE
        if self is Shape.PRIMITIVE:
            return None
        return Capability.MAP


@runtime_checkable
class MapDestructurable(Protocol):
    def deconstruct_keys(self, keys: KeyRequest) -> dict[Any, Any]: ...


@runtime_checkable
class SequenceDestructurable(Protocol):
    def deconstruct(self) -> Sequence[Any]: ...
