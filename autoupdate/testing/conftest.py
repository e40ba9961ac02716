"""
Pytest plugin for pr-autoupdate testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them in your tests, add this to your
conftest.py:

    pytest_plugins = ["autoupdate.testing.conftest"]

Or import the fixtures directly:

    from autoupdate.testing.fixtures import mock_client, sample_pull_request
"""

# Re-export all fixtures for pytest auto-discovery
from autoupdate.testing.fixtures import (
    default_policy,
    mock_client,
    mock_client_with_candidate,
    no_sleep,
    sample_check_run,
    sample_pull_request,
    sample_review,
)

__all__ = [
    "mock_client",
    "no_sleep",
    "default_policy",
    "sample_pull_request",
    "sample_review",
    "sample_check_run",
    "mock_client_with_candidate",
]
