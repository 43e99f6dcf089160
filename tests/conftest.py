# tests/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

import helpers.models  # noqa: F401  (registers the test tables)
from structview.core.db import Base, get_engine, get_sessionmaker


@pytest.fixture
def session() -> Session:
    engine = get_engine()
    Base.metadata.create_all(engine)
    with get_sessionmaker()() as session:
        yield session
    Base.metadata.drop_all(engine)
