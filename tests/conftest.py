"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-west-2')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')

from forward_reader.domain.catalog import default_catalog
from forward_reader.domain.forward_parser import ForwardParser


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables for all tests."""
    # Environment variables are already set above
    yield
    # Cleanup after all tests (optional)


@pytest.fixture(scope="session")
def catalog():
    """Built-in pattern catalog (built once for the session)."""
    return default_catalog()


@pytest.fixture
def parser(catalog):
    """Forward parser on the built-in catalog."""
    return ForwardParser(catalog)
