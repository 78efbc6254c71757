"""
Point the app at a throwaway SQLite file before anything imports liftlog.db,
then build the schema once per test session.
"""
import os
import tempfile
import uuid

_DB_PATH = os.path.join(tempfile.gettempdir(), f"liftlog-test-{uuid.uuid4().hex[:8]}.db")
os.environ["DB_URL"] = f"sqlite+pysqlite:///{_DB_PATH}"

import pytest

from liftlog import models  # noqa: F401
from liftlog.cache import view_cache
from liftlog.db import Base, SessionLocal, engine


@pytest.fixture(scope="session", autouse=True)
def _schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)
    engine.dispose()
    if os.path.exists(_DB_PATH):
        os.remove(_DB_PATH)


@pytest.fixture(autouse=True)
def _fresh_view_cache():
    view_cache.clear()
    yield
    view_cache.clear()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
