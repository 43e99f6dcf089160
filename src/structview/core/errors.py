from __future__ import annotations


class DestructuringError(Exception):
    pass


class RegistrationConflict(DestructuringError):
    """Raised when a type already exposes the capability being registered."""

    def __init__(self, target: type, capability: str, owner: str):
        self.target = target
        self.capability = capability
        self.owner = owner
        super().__init__(
            f"{capability} destructuring appears to already be defined in "
            f"{owner}; registering it for {target.__qualname__} would override "
            f"the behavior given by {owner}"
        )


class ParametersNotPermitted(DestructuringError, PermissionError):
    """Raised when unpermitted parameters are asked for their contents."""

    def __init__(self, message: str = "Only permitted parameters can be deconstructed."):
        super().__init__(message)


class UnpermittedParameters(DestructuringError):
    def __init__(self, keys: list[str]):
        self.keys = keys
        super().__init__(f"Found unpermitted parameters: {', '.join(keys)}")


class ParameterMissing(KeyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"param is missing or the value is empty: {key}")
