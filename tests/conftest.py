"""Shared pytest fixtures for the Chirpy tests."""
import os
import tempfile

# Point storage at a throwaway SQLite file BEFORE models is imported.
_DB_DIR = tempfile.mkdtemp(prefix="chirpy-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.db")
os.environ["APP_ENV"] = "test"

import pytest

from chirpy import create_app
from models import storage

SECRET = "test-jwt-secret-for-pytest-32chars!!"
OTHER_SECRET = "another-secret-that-is-32-chars-long!"


@pytest.fixture(autouse=True)
def _clean_db():
    """Every test starts with empty tables."""
    yield
    storage.drop_all()
    storage.close()


@pytest.fixture
def app():
    return create_app("test")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def manager(app):
    return app.extensions["session_manager"]


@pytest.fixture
def user(manager):
    return manager.register("a@b.com", "secret123")


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
