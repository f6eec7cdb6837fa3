"""
Test configuration and fixtures for ColorWheel tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app
from colorwheel.utils.metrics import reset_metrics


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_service_metrics():
    """Reset metrics before each test."""
    reset_metrics()
