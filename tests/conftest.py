"""Pytest configuration and shared fixtures for resultant tests."""

import pytest


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return 'asyncio'


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from resultant import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from resultant import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_nil():
    """Sample Nil value for testing."""
    from resultant import Nil

    return Nil


@pytest.fixture
def fresh_config():
    """Drop the active configuration before and after the test."""
    from resultant._config import reset

    reset()
    yield
    reset()
