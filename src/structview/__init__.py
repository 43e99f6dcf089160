"""
Structural destructuring for ``match`` statements.

Importing the package registers the built-in shapes on the default registry:
SQLAlchemy ``DeclarativeBase`` entities, pydantic models, ``Parameters`` and
``Collection``.
"""
from structview.contracts import ALL, Capability, KeyRequest, Shape
from structview.core.bootstrap import install
from structview.core.collection import Collection, materialize
from structview.core.errors import (
    DestructuringError,
    ParameterMissing,
    ParametersNotPermitted,
    RegistrationConflict,
    UnpermittedParameters,
)
from structview.core.facade import destructure_keys, destructure_sequence
from structview.core.parameters import Parameters
from structview.core.registry import CapabilityRegistry, register_capability, registry

install(registry)

__all__ = [
    "ALL", "Capability", "KeyRequest", "Shape",
    "Collection", "materialize",
    "Parameters",
    "CapabilityRegistry", "register_capability", "registry", "install",
    "destructure_keys", "destructure_sequence",
    "DestructuringError", "RegistrationConflict", "ParametersNotPermitted",
    "UnpermittedParameters", "ParameterMissing",
]
