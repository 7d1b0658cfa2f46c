"""Shared fixtures."""

import pytest

from equity_input.shared.config_loader import set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Start and end every test with the built-in default config."""
    set_config(None)
    yield
    set_config(None)
