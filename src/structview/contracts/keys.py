# structview/contracts/keys.py
"""
Key requests.

A key request is either ``ALL`` (``None``: every known key) or a finite
iterable of keys. Keys are compared against known names in canonical form;
results are keyed by the key object the caller asked for, so a mapping
pattern written with those keys finds them.
"""
from __future__ import annotations

from typing import Any, Callable, Collection, Hashable, Iterable, Optional

KeyRequest = Optional[Iterable[Hashable]]

ALL: KeyRequest = None


def canonical_key(key: Hashable) -> str:
    """Plain ``str`` form of a key, used to look up names fixed by a type."""
    return str(key)


def select_keys(
    keys: KeyRequest,
    known: Collection[str],
    read: Callable[[str], Any],
) -> dict[Any, Any]:
    """
    Build a key/value view over ``known`` names.

    Args:
        keys: ``ALL`` or the requested keys.
        known: Declared names, in canonical form.
        read: Reads the live value for a declared name.

    Returns:
        For ``ALL`` every known name mapped to its value; otherwise only the
        requested keys that are known. Unknown keys are omitted.
    """
    if keys is None:
        return {name: read(name) for name in known}

    out: dict[Any, Any] = {}
    for key in keys:
        name = canonical_key(key)
        if name in known:
            out[key] = read(name)
    return out
