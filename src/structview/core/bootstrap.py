# structview/core/bootstrap.py
"""
Default capability registrations.
"""
from __future__ import annotations

import logging
from typing import Iterable

from pydantic import BaseModel
from sqlalchemy.orm import DeclarativeBase

from structview.contracts.capability import Shape
from structview.core.capabilities import (
    load_and_register_capabilities,
    load_capabilities_config,
)
from structview.core.collection import Collection
from structview.core.config import settings
from structview.core.parameters import Parameters
from structview.core.registry import CapabilityRegistry

logger = logging.getLogger(__name__)

DEFAULT_SHAPES: tuple[tuple[type, Shape], ...] = (
    (DeclarativeBase, Shape.ENTITY),
    (BaseModel, Shape.MODEL),
    (Parameters, Shape.PARAMETERS),
    (Collection, Shape.COLLECTION),
)


def install(
    registry: CapabilityRegistry,
    *,
    config_paths: Iterable[str] | None = None,
) -> CapabilityRegistry:
    """
    Register the built-in shapes, then any configured ones, on ``registry``.

    Meant to run once per registry; a second run raises ``RegistrationConflict``.
    """
    for target, shape in DEFAULT_SHAPES:
        registry.register(target, shape)

    patterns = settings.capabilities_config_paths if config_paths is None else config_paths
    load_and_register_capabilities(
        cfg=load_capabilities_config(patterns),
        registry=registry,
    )
    logger.debug("Capability registry ready: %s", registry.list())
    return registry
