"""Pytest configuration for database integration tests."""

import os

import pytest
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@pytest.fixture(scope="session")
def test_database_url():
    """Database URL for integration tests, or None when not configured."""
    return os.getenv("TEST_DATABASE_URL")


@pytest.fixture(autouse=True)
def skip_if_no_database(request, test_database_url):
    """Skip tests marked with requires_database if TEST_DATABASE_URL is not set."""
    if request.node.get_closest_marker("requires_database"):
        if not test_database_url:
            pytest.skip("TEST_DATABASE_URL not set")
