# structview/core/parameters.py
"""
Request parameter sets.

A ``Parameters`` instance holds untrusted input (query string, JSON body).
It starts out unpermitted. The only way to obtain a permitted set is an
explicit whitelist step, ``permit`` or ``permit_all``, which returns a new
instance; nothing else ever flips the flag.

``Parameters`` is intentionally not a ``collections.abc.Mapping``: a mapping
pattern in a ``match`` statement cannot read it directly and has to go
through ``structview.destructure_keys``, which refuses unpermitted sets.
"""
from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping

from starlette.datastructures import UploadFile

from structview.core.config import settings
from structview.core.errors import (
    ParameterMissing,
    ParametersNotPermitted,
    UnpermittedParameters,
)

logger = logging.getLogger(__name__)

PERMITTED_SCALAR_TYPES = (
    str,
    bool,
    int,
    float,
    Decimal,
    date,
    datetime,
    time,
    uuid.UUID,
    UploadFile,
    type(None),
)

_MISSING = object()


def _is_permitted_scalar(value: Any) -> bool:
    return isinstance(value, PERMITTED_SCALAR_TYPES)


def _wrap(value: Any) -> Any:
    if isinstance(value, Parameters):
        return value
    if isinstance(value, Mapping):
        return Parameters(value)
    if isinstance(value, (list, tuple)):
        return [_wrap(v) for v in value]
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, Parameters):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(v) for v in value]
    return value


class Parameters:
    """Untrusted key/value input guarded by a ``permitted`` flag."""

    def __init__(self, data: Mapping[Any, Any] | None = None) -> None:
        self._data: dict[str, Any] = {
            str(k): _wrap(v) for k, v in (data or {}).items()
        }
        self._permitted = False

    @classmethod
    def from_request_data(
        cls,
        query: Iterable[tuple[str, str]] = (),
        body: Mapping[str, Any] | None = None,
    ) -> Parameters:
        """
        Merge query string pairs and a decoded body into one parameter set.

        Repeated query keys collect into a list. Body values win over query
        values with the same key.
        """
        merged: dict[str, Any] = {}
        for key, value in query:
            if key in merged:
                current = merged[key]
                merged[key] = current + [value] if isinstance(current, list) else [current, value]
            else:
                merged[key] = value
        merged.update(body or {})
        return cls(merged)

    @property
    def permitted(self) -> bool:
        return self._permitted

    # ---- reading -------------------------------------------------

    def __getitem__(self, key: Any) -> Any:
        return self._data[str(key)]

    def get(self, key: Any, default: Any = None) -> Any:
        return self._data.get(str(key), default)

    def __contains__(self, key: object) -> bool:
        return str(key) in self._data

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))

    def to_dict(self) -> dict[str, Any]:
        """Plain ``dict`` copy, nested sets included. Refused unless permitted."""
        if not self._permitted:
            raise ParametersNotPermitted("Only permitted parameters can be converted to a dict.")
        return {k: _unwrap(v) for k, v in self._data.items()}

    # ---- authorization -------------------------------------------

    def require(self, key: Any) -> Any:
        """Return the value at ``key``, raising when it is absent or empty."""
        value = self._data.get(str(key), _MISSING)
        if value is _MISSING or value is None or value == "" or (
            isinstance(value, (Parameters, list)) and len(value) == 0
        ):
            raise ParameterMissing(str(key))
        return value

    def permit(self, *filters: str | Mapping[str, Iterable[Any]]) -> Parameters:
        """
        Return a new, permitted set holding only whitelisted keys.

        Filters:
            - ``"name"``: a permitted scalar value
            - ``{"name": []}``: a list of permitted scalars
            - ``{"name": [filters...]}``: a nested set (or list of nested
              sets), itself permitted with ``filters``
        """
        out = Parameters()
        for f in filters:
            if isinstance(f, str):
                self._permit_scalar(f, out)
            elif isinstance(f, Mapping):
                for name, nested in f.items():
                    self._permit_nested(str(name), list(nested), out)
            else:
                raise TypeError(f"Unsupported permit filter: {f!r}")

        self._check_unpermitted(out)
        out._permitted = True
        return out

    def permit_all(self) -> Parameters:
        """Return a permitted copy of everything, nested sets included."""
        out = Parameters()
        out._data = {k: _permit_all(v) for k, v in self._data.items()}
        out._permitted = True
        return out

    def _permit_scalar(self, name: str, out: Parameters) -> None:
        value = self._data.get(name, _MISSING)
        if value is not _MISSING and _is_permitted_scalar(value):
            out._data[name] = value

    def _permit_nested(self, name: str, nested: list[Any], out: Parameters) -> None:
        value = self._data.get(name, _MISSING)
        if value is _MISSING:
            return
        if not nested:
            if isinstance(value, list) and all(_is_permitted_scalar(v) for v in value):
                out._data[name] = list(value)
        elif isinstance(value, Parameters):
            out._data[name] = value.permit(*nested)
        elif isinstance(value, list):
            out._data[name] = [v.permit(*nested) for v in value if isinstance(v, Parameters)]

    def _check_unpermitted(self, out: Parameters) -> None:
        action = settings.action_on_unpermitted_parameters
        if action == "ignore":
            return
        unpermitted = [k for k in self._data if k not in out._data]
        if not unpermitted:
            return
        if action == "raise":
            raise UnpermittedParameters(unpermitted)
        logger.info("Unpermitted parameters: %s", ", ".join(unpermitted))

    # ---- misc ----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._permitted == other._permitted and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Parameters {self._data!r} permitted: {self._permitted}>"


def _permit_all(value: Any) -> Any:
    if isinstance(value, Parameters):
        return value.permit_all()
    if isinstance(value, list):
        return [_permit_all(v) for v in value]
    return value
