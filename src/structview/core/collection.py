# structview/core/collection.py
"""
Lazily materialized collections.

A ``Collection`` wraps a loader (a query, a relationship read, any
zero-argument callable) and runs it the first time its contents are needed.
The result is cached on the instance, so destructuring the same collection
again never repeats the backing fetch.

The whole result is held in memory. Bound the dataset upstream when it can
be large.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Any, Callable, Iterable, Iterator

from sqlalchemy import Select
from sqlalchemy.orm import Session, WriteOnlyCollection, object_session
from sqlalchemy.orm.dynamic import AppenderQuery
from sqlalchemy.orm.exc import DetachedInstanceError

from structview.core.config import settings

logger = logging.getLogger(__name__)


class Collection(Sequence):
    """Ordered, finite, lazily loaded sequence of entities."""

    def __init__(self, loader: Callable[[], Iterable[Any]], *, label: str | None = None) -> None:
        self._loader = loader
        self._label = label or getattr(loader, "__qualname__", "collection")
        self._records: list[Any] | None = None
        self._lock = threading.Lock()

    # ---- constructors --------------------------------------------

    @classmethod
    def from_statement(cls, session: Session, statement: Select) -> Collection:
        """Collection over the entities a SELECT statement returns."""
        return cls(lambda: session.scalars(statement).all(), label=str(statement))

    @classmethod
    def from_relationship(cls, entity: Any, name: str) -> Collection:
        """Collection over a to-many relationship, read only when materialized."""

        def load() -> Iterable[Any]:
            related = getattr(entity, name)
            if isinstance(related, WriteOnlyCollection):
                session = object_session(entity)
                if session is None:
                    raise DetachedInstanceError(
                        f"Parent instance {entity!r} is not bound to a Session; "
                        f"cannot load write-only relationship '{name}'"
                    )
                return session.scalars(related.select()).all()
            if isinstance(related, AppenderQuery):
                return related.all()
            return related

        return cls(load, label=f"{type(entity).__name__}.{name}")

    # ---- materialization -----------------------------------------

    @property
    def loaded(self) -> bool:
        return self._records is not None

    def materialize(self) -> list[Any]:
        records = self._records
        if records is not None:
            return records

        with self._lock:
            # Another thread may have finished while we waited
            if self._records is None:
                loaded = list(self._loader())
                logger.debug("Materialized %s (%d records)", self._label, len(loaded))
                if len(loaded) > settings.collection_warn_threshold:
                    logger.warning(
                        "Collection %s holds %d records in memory (threshold %d)",
                        self._label,
                        len(loaded),
                        settings.collection_warn_threshold,
                    )
                self._records = loaded
            return self._records

    # ---- sequence protocol ---------------------------------------

    def __getitem__(self, index):
        return self.materialize()[index]

    def __len__(self) -> int:
        return len(self.materialize())

    def __iter__(self) -> Iterator[Any]:
        return iter(self.materialize())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self.materialize() == other.materialize()
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self.materialize() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._records is None:
            return f"<Collection {self._label} (not loaded)>"
        return f"<Collection {self._label} {self._records!r}>"


def materialize(collection: Collection) -> list[Any]:
    """Materialize ``collection``, running its loader at most once."""
    return collection.materialize()
