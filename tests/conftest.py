"""Pytest configuration and shared fixtures for klaw-guard tests."""

import os

import pytest
from hypothesis import settings

settings.register_profile('ci', max_examples=500)
settings.register_profile('dev', max_examples=50)
settings.load_profile(os.environ.get('HYPOTHESIS_PROFILE', 'default'))


@pytest.fixture
def clean_config():
    """Reset global guard configuration and log hooks around a test."""
    import structlog

    from klaw_guard import reset
    from klaw_guard._logging import clear_log_hooks

    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()
    structlog.reset_defaults()


@pytest.fixture
def people():
    """Records with a repeated id, for key-based uniqueness checks."""
    return [
        {'id': 1, 'name': 'Ada'},
        {'id': 1, 'name': 'Ada (duplicate)'},
        {'id': 2, 'name': 'Grace'},
    ]
