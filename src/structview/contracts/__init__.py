"""Public contracts for structural destructuring."""
from structview.contracts.capability import (
    Capability,
    MapDestructurable,
    SequenceDestructurable,
    Shape,
)
from structview.contracts.keys import ALL, KeyRequest, canonical_key, select_keys

__all__ = [
    "Capability", "Shape",
    "MapDestructurable", "SequenceDestructurable",
    "ALL", "KeyRequest", "canonical_key", "select_keys",
]
