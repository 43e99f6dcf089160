# structview/core/registry.py
"""
Capability registry – records which types are destructurable, and how.

Registration happens once, at initialization. It refuses to shadow a
capability the target already exposes, whether natively (the type defines the
protocol method itself) or through an earlier registration on the type or one
of its bases.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator

from structview.contracts.capability import Capability, Shape
from structview.core.errors import RegistrationConflict

logger = logging.getLogger(__name__)


class CapabilityRegistry:
    """Maps target types to the shape they are destructured as."""

    def __init__(self) -> None:
        self._shapes: dict[type, Shape] = {}

    def register(self, target: type, shape: Shape) -> None:
        if not isinstance(target, type):
            raise TypeError(f"Expected a type, got {target!r}")
        shape = Shape(shape)
        capability = shape.capability
        if capability is None:
            raise ValueError(f"Shape '{shape.value}' cannot be registered")

        owner = self.owner_of(target, capability)
        if owner is not None:
            raise RegistrationConflict(target, capability.value, owner)

        self._shapes[target] = shape
        logger.info(
            "Registered %s capability for %s as %s",
            capability.value,
            target.__qualname__,
            shape.value,
        )

    def owner_of(self, target: type, capability: Capability) -> str | None:
        """Name whoever already gives ``target`` the capability, if anyone."""
        for klass in target.__mro__:
            registered = self._shapes.get(klass)
            if registered is not None and registered.capability is capability:
                return f"{klass.__qualname__} (registered as {registered.value})"
            if capability.method_name in vars(klass):
                return klass.__qualname__
        return None

    def exposes(self, target: type, capability: Capability) -> bool:
        return self.owner_of(target, capability) is not None

    def shape_of(self, value: Any) -> Shape:
        """Nearest registered shape along the value's MRO, else PRIMITIVE."""
        for klass in type(value).__mro__:
            shape = self._shapes.get(klass)
            if shape is not None:
                return shape
        return Shape.PRIMITIVE

    def get(self, target: type) -> Shape:
        try:
            return self._shapes[target]
        except KeyError:
            raise KeyError(
                f"Type '{target.__qualname__}' not registered. "
                f"Available: {[t.__qualname__ for t in self._shapes]}"
            )

    def list(self) -> list[dict[str, str]]:
        return [
            {"type": f"{t.__module__}:{t.__qualname__}", "shape": s.value}
            for t, s in self._shapes.items()
        ]

    def __iter__(self) -> Iterator[type]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, target: object) -> bool:
        return target in self._shapes


registry = CapabilityRegistry()


def register_capability(target: type, shape: Shape) -> None:
    """Register ``target`` on the default registry."""
    registry.register(target, shape)
