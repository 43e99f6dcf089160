# structview/core/capabilities.py
"""
Configuration models and loading for extra capability registrations.

Used for mapped classes that do not derive from ``DeclarativeBase`` (classic
``declarative_base()`` or imperative mappings) and for any other type that
should be destructured like one of the built-in shapes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from structview.contracts.capability import Shape
from structview.core.loader import import_attr, load_yaml_files, substitute_env_vars
from structview.core.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapabilitySpec:
    """
    Specification for one capability registration.

    Attributes:
        name: Unique identifier for this registration
        type_path: Import path in format 'module:ClassName'
        shape: Shape the type is destructured as
    """

    name: str
    type_path: str
    shape: Shape


@dataclass(frozen=True)
class CapabilitiesConfig:
    capabilities: list[CapabilitySpec] = field(default_factory=list)


def load_capabilities_config(patterns: Iterable[str]) -> CapabilitiesConfig:
    """
    Load capability registrations from YAML files.

    Expected YAML structure:
    ```yaml
    capabilities:
      legacy_base:
        type: "${MODELS_MODULE:-myapp.models}:LegacyBase"
        shape: entity
    ```

    Later files override earlier ones entry by entry.

    Raises:
        ValueError: If an entry is incomplete, names an unknown shape, or
            references an unset environment variable
    """
    yamls = load_yaml_files(patterns)

    raw_map: dict[str, dict[str, Any]] = {}
    for data in yamls:
        for name, spec in (data.get("capabilities") or {}).items():
            raw_map[name] = spec or {}

    specs: list[CapabilitySpec] = []
    for name, raw in raw_map.items():
        for required in ("type", "shape"):
            if required not in raw:
                raise ValueError(f"Capability '{name}' missing required '{required}' field")

        try:
            type_path = substitute_env_vars(raw["type"])
        except ValueError as exc:
            raise ValueError(f"Capability '{name}' config error: {exc}") from exc

        try:
            shape = Shape(str(raw["shape"]).lower())
        except ValueError as exc:
            raise ValueError(
                f"Capability '{name}' has unknown shape '{raw['shape']}'. "
                f"Available: {[s.value for s in Shape if s is not Shape.PRIMITIVE]}"
            ) from exc

        specs.append(CapabilitySpec(name=name, type_path=type_path, shape=shape))

    logger.debug("Loaded %d capability specification(s): %s", len(specs), [s.name for s in specs])
    return CapabilitiesConfig(capabilities=specs)


def load_and_register_capabilities(
    *,
    cfg: CapabilitiesConfig,
    registry: CapabilityRegistry,
) -> CapabilityRegistry:
    """Import every configured type and register it. Any failure is fatal."""
    for spec in cfg.capabilities:
        target = import_attr(spec.type_path)
        if not isinstance(target, type):
            raise TypeError(
                f"Capability '{spec.name}': '{spec.type_path}' is not a class"
            )
        registry.register(target, spec.shape)

    if cfg.capabilities:
        logger.info(
            "Registered %d configured capability(ies): %s",
            len(cfg.capabilities),
            [s.name for s in cfg.capabilities],
        )
    return registry
