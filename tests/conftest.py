"""Shared fixtures for the template service tests."""

import pytest
from fastapi.testclient import TestClient

from service_template import BACKEND, TEMPLATE_1, create_app


@pytest.fixture
def template_client():
    return TestClient(create_app(TEMPLATE_1))


@pytest.fixture
def backend_client():
    return TestClient(create_app(BACKEND))
