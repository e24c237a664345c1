"""Root conftest — shared test configuration."""

import random

import pytest
from fastapi.testclient import TestClient

from app import app


@pytest.fixture
def rng():
    """Fuente aleatoria con semilla fija para tests reproducibles."""
    return random.Random(20261019)


@pytest.fixture
def client():
    return TestClient(app)
