"""Fixtures compartidas."""

import pytest
from fastapi.testclient import TestClient

from golftour.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
