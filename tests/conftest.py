"""Pytest configuration and shared fixtures for okerr tests."""

import pytest

import okerr._config as config_module

_ENV_VARS = ('OKERR_LOG_LEVEL', 'OKERR_LOG_JSON')


@pytest.fixture
def clean_config(monkeypatch):
    """Start the test from an environment-free, uninitialized config."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, '_config', None)


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from okerr import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from okerr import Err

    return Err('Error occurred')
