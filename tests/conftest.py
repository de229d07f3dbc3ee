"""
Shared fixtures.

DATABASE_URL must point at a throwaway SQLite file before any orderly module
is imported, since the database instance is created at import time.
"""
import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="orderly-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'orderly.db')}"

from fastapi.testclient import TestClient  # noqa: E402

from orderly.app import app  # noqa: E402
from orderly.modules.database import connect_to_db, database, disconnect_from_db, init_db  # noqa: E402
from orderly.modules.users.repositories import users  # noqa: E402


@pytest.fixture
async def db_setup():
    """Connected database with an empty users table."""
    await connect_to_db()
    await init_db()
    await database.execute(users.delete())
    yield database
    await disconnect_from_db()


@pytest.fixture
def client():
    """HTTP client running the app lifespan (connect + schema creation)."""
    with TestClient(app) as test_client:
        yield test_client
