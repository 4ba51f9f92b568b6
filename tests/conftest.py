"""
Pytest fixtures for the salary distribution service tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from main import app
from services.distribution_service import calculate_distribution


@pytest.fixture
def client():
    """HTTP client bound to the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def typical_report():
    """Report for a typical monthly salary (gross 3000, net 1900)."""
    return calculate_distribution(3000, 1900)


@pytest.fixture
def untaxed_report():
    """Report where net equals gross, so income tax clamps to zero."""
    return calculate_distribution(1000, 1000)
