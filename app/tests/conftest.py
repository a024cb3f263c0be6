"""Shared fixtures for glossa tests."""

import pytest

from glossa.i18n import reset_global


@pytest.fixture(autouse=True)
def clean_global_dictionaries():
    """Start and finish every test with empty process-wide dictionaries."""
    reset_global()
    yield
    reset_global()
