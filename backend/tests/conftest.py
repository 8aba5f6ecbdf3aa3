import os

import pytest

# Use in-memory sqlite for tests; must be set before the app is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

from fastapi.testclient import TestClient  # noqa: E402

from trackfit.db import SessionLocal  # noqa: E402
from trackfit.main import app  # noqa: E402
from trackfit.models.weight import Weight  # noqa: E402


@pytest.fixture(autouse=True)
def empty_weights():
    db = SessionLocal()
    try:
        db.query(Weight).delete()
        db.commit()
        yield
    finally:
        db.close()


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
